"""Declarative input validation shared by every calculator.

Each calculator declares a table of field rules (RangeField, EnumField) plus
optional CrossFieldRules. InputSchema turns the table into a pydantic model
once; validate() runs raw form input through it and reports every rejected
field by name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Annotated, Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, create_model
from pydantic_core import PydanticCustomError

from projection_engine.domain.exceptions import FieldError, InputValidationError

ROOT_FIELD = "__root__"

# pydantic error types that mean "parsed fine, but out of bounds"
_BOUND_ERRORS = {
    "greater_than",
    "greater_than_equal",
    "less_than",
    "less_than_equal",
    "finite_number",
}


@dataclass(frozen=True)
class RangeField:
    """Numeric field with inclusive (ge/le) or exclusive (gt) bounds."""

    name: str
    description: str
    kind: Type[Union[int, float]] = float
    ge: Optional[float] = None
    gt: Optional[float] = None
    le: Optional[float] = None

    def bounds(self) -> Dict[str, float]:
        return {
            key: value
            for key, value in (("ge", self.ge), ("gt", self.gt), ("le", self.le))
            if value is not None
        }

    def annotation(self) -> Tuple[Any, Any]:
        constraints: Dict[str, Any] = self.bounds()
        if self.kind is float:
            constraints["allow_inf_nan"] = False
        return (self.kind, Field(..., description=self.description, **constraints))

    def describe(self) -> Dict[str, Any]:
        bounds = self.bounds()
        return {
            "name": self.name,
            "kind": "integer" if self.kind is int else "number",
            "description": self.description,
            **bounds,
        }


@dataclass(frozen=True)
class EnumField:
    """Categorical field restricted to a fixed set of choices."""

    name: str
    description: str
    choices: Tuple[Any, ...]
    coerce: Optional[Callable[[Any], Any]] = None

    def _check(self, value: Any) -> Any:
        if self.coerce is not None:
            try:
                value = self.coerce(value)
            except (TypeError, ValueError):
                raise PydanticCustomError("enum_choice", self.description) from None
        if value not in self.choices:
            raise PydanticCustomError("enum_choice", self.description)
        return value

    def annotation(self) -> Tuple[Any, Any]:
        return (
            Annotated[Any, BeforeValidator(self._check)],
            Field(..., description=self.description),
        )

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": "enum",
            "description": self.description,
            "choices": list(self.choices),
        }


@dataclass(frozen=True)
class CrossFieldRule:
    """Constraint across already-valid fields, reported against `field`."""

    field: str
    predicate: Callable[[BaseModel], bool]
    message: str


FieldRule = Union[RangeField, EnumField]


def whole_number(value: Any) -> int:
    """Coerce for integer choices: "12", 12 and 12.0 pass; 12.5 and True do not."""
    if isinstance(value, bool):
        raise TypeError("booleans are not numbers here")
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"{value!r} is not a whole number")
    return int(number)


def _model_name(name: str) -> str:
    return "".join(part.capitalize() for part in re.split(r"[^0-9a-zA-Z]+", name) if part) + "Input"


class InputSchema:
    """A calculator's field-constraint table and the model built from it."""

    def __init__(
        self,
        name: str,
        fields: Sequence[FieldRule],
        cross_rules: Sequence[CrossFieldRule] = (),
    ):
        self.name = name
        self.fields = tuple(fields)
        self.cross_rules = tuple(cross_rules)
        self._rules: Dict[str, FieldRule] = {rule.name: rule for rule in self.fields}
        self.model: Type[BaseModel] = create_model(
            _model_name(name),
            __config__=ConfigDict(extra="ignore"),
            **{rule.name: rule.annotation() for rule in self.fields},
        )

    def field_names(self) -> List[str]:
        return [rule.name for rule in self.fields]

    def describe(self) -> List[Dict[str, Any]]:
        described = [rule.describe() for rule in self.fields]
        for rule in self.cross_rules:
            described.append({"name": rule.field, "kind": "cross-field", "description": rule.message})
        return described

    def field_error(self, error: Mapping[str, Any]) -> FieldError:
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else ROOT_FIELD
        rule = self._rules.get(field)
        if rule is not None and error.get("type") in _BOUND_ERRORS:
            return FieldError(field=field, message=rule.description)
        return FieldError(field=field, message=error.get("msg", "Invalid value"))


def validate(raw: Any, schema: InputSchema) -> BaseModel:
    """
    Coerce and check raw calculator input against a schema.

    Per-field rules are checked first; cross-field rules run only when every
    field is individually valid. Raises InputValidationError listing each
    offending field, so no partial input ever reaches a formula.
    """
    if not isinstance(raw, Mapping):
        raise InputValidationError(
            [FieldError(field=ROOT_FIELD, message="Input must be an object of field values")]
        )

    try:
        validated = schema.model.model_validate(dict(raw))
    except ValidationError as exc:
        raise InputValidationError([schema.field_error(error) for error in exc.errors()]) from None

    errors = [
        FieldError(field=rule.field, message=rule.message)
        for rule in schema.cross_rules
        if not rule.predicate(validated)
    ]
    if errors:
        raise InputValidationError(errors)

    return validated

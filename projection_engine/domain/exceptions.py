"""Engine exceptions"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class FieldError:
    """A single rejected input field and the constraint it broke."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class EngineError(Exception):
    """Base exception for the projection engine"""

    pass


class InputValidationError(EngineError, ValueError):
    """Raw calculator input was rejected before any formula ran."""

    def __init__(self, errors: List[FieldError]):
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]

    def to_dict(self) -> List[Dict[str, str]]:
        return [error.to_dict() for error in self.errors]


class UnknownCalculatorError(EngineError, LookupError):
    """No calculator is registered under the requested slug"""

    pass


class UnknownCurrencyError(EngineError, LookupError):
    """Currency code is not in the display table"""

    pass


class RateLookupError(EngineError, LookupError):
    """Rate provider has no rate for the requested key"""

    pass


class ContentServiceError(EngineError):
    """External content service failed or returned an unusable payload"""

    pass

"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request

from projection_engine.config import settings
from projection_engine.content import generate_content
from projection_engine.core.catalog import get_calculator, list_calculators, run_calculator
from projection_engine.domain.exceptions import (
    InputValidationError,
    UnknownCalculatorError,
    UnknownCurrencyError,
)
from projection_engine.presentation.currency import AVAILABLE_CURRENCIES

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(InputValidationError)
def _handle_validation_error(exc: InputValidationError):
    """Report each rejected field so forms can show the message inline."""
    return jsonify({"detail": exc.to_dict()}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(UnknownCalculatorError)
def _handle_unknown_calculator(exc: UnknownCalculatorError):
    return jsonify({"error": str(exc)}), HTTPStatus.NOT_FOUND


@api_bp.errorhandler(UnknownCurrencyError)
def _handle_unknown_currency(exc: UnknownCurrencyError):
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong", "service": settings.service_name})


@api_bp.get("/calculators")
def calculators() -> Any:
    category = request.args.get("category")
    return jsonify([calc.metadata() for calc in list_calculators(category)])


@api_bp.get("/calculators/<slug>")
def calculator_detail(slug: str) -> Any:
    calc = get_calculator(slug)
    return jsonify({**calc.metadata(), "fields": calc.schema.describe()})


@api_bp.get("/currencies")
def currencies() -> Any:
    return jsonify([tag.model_dump() for tag in AVAILABLE_CURRENCIES])


@api_bp.post("/calc/<slug>")
def calculate(slug: str) -> Any:
    """Validate, compute and present one calculator run."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=True)
    currency = request.args.get("currency", settings.default_currency)
    result = run_calculator(slug, raw_payload, currency=currency)
    return jsonify(result.model_dump())


@api_bp.post("/content")
def content() -> Any:
    payload = request.get_json(force=True, silent=True) or {}
    topic = str(payload.get("topic") or "").strip()
    if not topic:
        return jsonify({"error": "topic is required"}), HTTPStatus.BAD_REQUEST

    generated = generate_content(topic, payload.get("keywords"))
    return jsonify(generated.model_dump())

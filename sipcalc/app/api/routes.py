"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from sipcalc import config
from sipcalc.core.calculation import run_calculation
from sipcalc.core.errors import DivisionByZero, InvalidParameter
from sipcalc.core.projection import available_modes
from sipcalc.schemas.calculation import CalculationRequest
from sipcalc.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected request: %d validation error(s)", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidParameter)
def _handle_invalid_parameter(exc: InvalidParameter):
    logger.info("rejected parameter %s: %s", exc.field, exc)
    return jsonify({"error": str(exc), "field": exc.field}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(DivisionByZero)
def _handle_division_by_zero(exc: DivisionByZero):
    logger.warning("calculation aborted: %s", exc)
    return jsonify({"error": str(exc)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(status="ok", modes=available_modes())
    return jsonify(response.model_dump())


@api_bp.get("/sip/defaults")
def defaults() -> Any:
    """Initial form values for each calculator mode."""
    return jsonify(config.DEFAULT_PARAMETERS)


@api_bp.post("/sip/calculate")
def calculate() -> Any:
    """Project one SIP and return its display values and chart data."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationRequest.model_validate(raw_payload)
    response = run_calculation(payload)
    return jsonify(response.model_dump(mode="json"))

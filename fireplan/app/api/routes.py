"""HTTP routes for the Flask API."""

import logging
import math
from http import HTTPStatus
from typing import Any, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from fireplan.core.fire import compute_fire_projection, summarize_fire_journey
from fireplan.core.net_worth import calculate_net_worth
from fireplan.schemas.fire import FireRequest, FireResponse
from fireplan.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("Rejected request to %s: %d validation error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False, include_input=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok", environment=current_app.config["APP_ENV"])
    return jsonify(response.model_dump())


@api_bp.post("/calc/fire")
def fire() -> Any:
    """Compute the FIRE number, timeline and required savings."""
    raw_payload = request.get_json(silent=True)
    if raw_payload is None:
        return jsonify({"detail": "request body must be JSON"}), HTTPStatus.BAD_REQUEST

    payload = FireRequest.model_validate(raw_payload)

    net_worth = payload.currentNetWorth
    if net_worth is None:
        net_worth = calculate_net_worth(payload.assets, payload.liabilities)

    result = compute_fire_projection(
        payload.annualExpenses,
        payload.withdrawalRate,
        payload.expectedReturn,
        payload.monthlySavings,
        net_worth,
    )
    journey = summarize_fire_journey(result, payload.monthlySavings, payload.currentAge)

    response = FireResponse(
        fireNumber=_finite_or_none(result.fire_number),
        yearsToFire=result.years_to_fire,
        monthlySavingsNeeded=_finite_or_none(result.monthly_savings_needed),
        progressPercentage=result.progress_percentage,
        projectedFireDate=result.projected_fire_date,
        currentNetWorth=_finite_or_none(net_worth),
        fireAge=journey.fire_age,
        underOneYear=journey.under_one_year,
        savingsIncreaseNeeded=journey.savings_increase_needed,
        reachable=journey.reachable,
    )
    return jsonify(response.model_dump(mode="json"))

"""FIRE (Financial Independence, Retire Early) projection logic."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
MAX_YEARS = 100
MAX_MONTHS = MAX_YEARS * MONTHS_PER_YEAR


class FireResult(BaseModel):
    """Outcome of one FIRE projection run."""

    fire_number: float
    years_to_fire: float
    months_to_fire: int
    target_reached: bool
    monthly_savings_needed: float
    progress_percentage: float
    projected_fire_date: date


class FireJourney(BaseModel):
    """Display-level summary derived from a FireResult."""

    fire_age: Optional[int] = None
    under_one_year: bool
    savings_increase_needed: bool
    reachable: bool


def fire_number_for(annual_expenses: float, withdrawal_rate_percent: float) -> float:
    """Portfolio size whose withdrawals at the given rate cover annual_expenses.

    A non-positive withdrawal rate has no finite answer, so the target is
    reported as +inf ("unreachable").
    """
    if withdrawal_rate_percent <= 0:
        return math.inf
    return annual_expenses * 100 / withdrawal_rate_percent


def _growth_factor(monthly_return: float, months: int) -> float:
    """(1 + r)^n, saturating to inf instead of raising on overflow."""
    try:
        return (1 + monthly_return) ** months
    except OverflowError:
        return math.inf


def simulate_months_to_target(
    current_net_worth: float,
    target: float,
    monthly_return: float,
    monthly_contribution: float,
) -> Tuple[int, bool]:
    """
    Step the balance forward one month at a time until it reaches target.

    Each month: balance = balance * (1 + monthly_return) + monthly_contribution.
    Stops at MAX_MONTHS when the target is never reached.

    Returns (months elapsed, whether the target was reached).
    """
    if current_net_worth >= target:
        return 0, True

    projected = float(current_net_worth)
    months = 0
    while projected < target and months < MAX_MONTHS:
        months += 1
        projected = projected * (1 + monthly_return) + monthly_contribution

    reached = projected >= target
    if not reached:
        logger.info(
            "FIRE target %.2f not reached within %d years (balance %.2f)",
            target,
            MAX_YEARS,
            projected,
        )
    return months, reached


def required_monthly_contribution(
    target: float,
    current_net_worth: float,
    monthly_return: float,
    months: int,
) -> float:
    """
    Level monthly payment that grows current_net_worth into target in `months`.

    Inverts FV = PV * (1 + r)^n + PMT * ((1 + r)^n - 1) / r for PMT. At r == 0
    the annuity factor collapses to n, so the linear form is used instead.
    Never negative: an overshooting trajectory needs no contribution.
    """
    if months <= 0:
        return 0.0
    if not math.isfinite(target):
        return math.inf

    if monthly_return == 0:
        needed = (target - current_net_worth) / months
    else:
        growth = _growth_factor(monthly_return, months)
        annuity_factor = (growth - 1) / monthly_return
        if annuity_factor == 0:
            # 1 + r rounds to 1.0
            needed = (target - current_net_worth) / months
        else:
            needed = (target - current_net_worth * growth) / annuity_factor

    if math.isnan(needed):
        return 0.0
    return max(0.0, needed)


def progress_percentage(current_net_worth: float, fire_number: float) -> float:
    """Share of the FIRE number already saved, clamped to [0, 100]."""
    if current_net_worth >= fire_number:
        return 100.0
    if fire_number == 0:
        # negative net worth against a zero target
        return 0.0
    pct = current_net_worth / fire_number * 100
    return max(0.0, min(pct, 100.0))


def projected_date(months: int, today: Optional[date] = None) -> date:
    """Calendar date `months` months after today (month-end days are clamped)."""
    start = today or date.today()
    years, remainder = divmod(months, MONTHS_PER_YEAR)
    return start + relativedelta(years=years, months=remainder)


def compute_fire_projection(
    annual_expenses: float,
    withdrawal_rate_percent: float,
    expected_return_percent: float,
    monthly_savings_contribution: float,
    current_net_worth: float,
    *,
    today: Optional[date] = None,
) -> FireResult:
    """
    Project when the FIRE number is reached from today's net worth.

    Steps:
      1) FIRE number from annual expenses and the withdrawal rate.
      2) Convert the annual return percentage to a monthly rate.
      3) Simulate month by month (contribution added after growth) until the
         target or the 100-year horizon.
      4) Solve the annuity equation for the level contribution that lands on
         the target in exactly that many months.
      5) Progress percentage and projected calendar date.

    Degenerate inputs never raise: a zero withdrawal rate gives an infinite
    target and the simulation stops at the horizon.
    """
    logger.debug(
        "FIRE projection: expenses=%s withdrawal=%s%% return=%s%% contribution=%s net_worth=%s",
        annual_expenses,
        withdrawal_rate_percent,
        expected_return_percent,
        monthly_savings_contribution,
        current_net_worth,
    )

    fire_number = fire_number_for(annual_expenses, withdrawal_rate_percent)
    monthly_return = expected_return_percent / 100 / MONTHS_PER_YEAR

    months, reached = simulate_months_to_target(
        current_net_worth,
        fire_number,
        monthly_return,
        monthly_savings_contribution,
    )
    needed = required_monthly_contribution(fire_number, current_net_worth, monthly_return, months)

    return FireResult(
        fire_number=fire_number,
        years_to_fire=months / MONTHS_PER_YEAR,
        months_to_fire=months,
        target_reached=reached,
        monthly_savings_needed=needed,
        progress_percentage=progress_percentage(current_net_worth, fire_number),
        projected_fire_date=projected_date(months, today),
    )


def summarize_fire_journey(
    result: FireResult,
    monthly_savings_contribution: float,
    current_age: Optional[int] = None,
) -> FireJourney:
    """FIRE age and the flags the calculator page shows next to a result."""
    fire_age = None
    if current_age is not None:
        fire_age = current_age + math.ceil(result.years_to_fire)

    return FireJourney(
        fire_age=fire_age,
        under_one_year=result.years_to_fire < 1,
        savings_increase_needed=result.monthly_savings_needed > monthly_savings_contribution,
        reachable=result.target_reached,
    )

from __future__ import annotations

import math
from datetime import date
from math import isclose

from fireplan.core.fire import (
    compute_fire_projection,
    required_monthly_contribution,
    simulate_months_to_target,
)

TODAY = date(2024, 1, 15)


def test_already_there():
    """Net worth at or above the FIRE number: nothing left to do."""
    for net_worth in (1_000_000, 1_500_000, 50_000_000):
        result = compute_fire_projection(40000, 4, 7, 2000, net_worth, today=TODAY)

        assert result.years_to_fire == 0
        assert result.months_to_fire == 0
        assert result.monthly_savings_needed == 0
        assert result.progress_percentage == 100
        assert result.projected_fire_date == TODAY
        assert result.target_reached


def test_no_growth_no_savings_hits_ceiling():
    result = compute_fire_projection(40000, 4, 0, 0, 0, today=TODAY)

    assert result.years_to_fire == 100
    assert result.months_to_fire == 1200
    assert not result.target_reached
    assert result.projected_fire_date == date(2124, 1, 15)


def test_negative_return_without_savings_hits_ceiling():
    result = compute_fire_projection(40000, 4, -3, 0, 200000, today=TODAY)

    assert result.years_to_fire == 100
    assert not result.target_reached


def test_zero_withdrawal_rate_is_unreachable():
    result = compute_fire_projection(40000, 0, 7, 2000, 100000, today=TODAY)

    assert math.isinf(result.fire_number) and result.fire_number > 0
    assert result.years_to_fire == 100
    assert result.progress_percentage == 0
    assert math.isinf(result.monthly_savings_needed)
    assert not result.target_reached


def test_zero_expenses_means_already_there():
    result = compute_fire_projection(0, 4, 7, 0, 0, today=TODAY)

    assert result.fire_number == 0
    assert result.years_to_fire == 0
    assert result.monthly_savings_needed == 0
    assert result.progress_percentage == 100


def test_zero_return_uses_linear_payment():
    """With no growth the required payment is simply the gap spread over the months."""
    result = compute_fire_projection(30000, 4, 0, 1000, 150000, today=TODAY)
    months = result.months_to_fire

    assert months == 600
    assert isclose(result.monthly_savings_needed, (750000 - 150000) / months)
    assert not math.isnan(result.monthly_savings_needed)


def test_negative_net_worth_clamps_progress_to_zero():
    result = compute_fire_projection(40000, 4, 7, 2000, -50000, today=TODAY)

    assert result.progress_percentage == 0
    assert result.years_to_fire > 0


def test_overshooting_trajectory_needs_no_savings():
    # growth alone carries the balance past the target
    assert required_monthly_contribution(1000.0, 990.0, 0.05, 1) == 0.0


def test_simulation_adds_contribution_after_growth():
    months, reached = simulate_months_to_target(1000.0, 1210.0, 0.1, 0.0)

    assert reached
    assert months == 2


def test_month_end_date_is_clamped():
    result = compute_fire_projection(12000, 4, 0, 25000, 0, today=date(2024, 1, 31))

    assert result.months_to_fire == 12
    assert result.projected_fire_date == date(2025, 1, 31)

    result = compute_fire_projection(12000, 4, 0, 300000, 0, today=date(2024, 1, 31))
    assert result.months_to_fire == 1
    assert result.projected_fire_date == date(2024, 2, 29)

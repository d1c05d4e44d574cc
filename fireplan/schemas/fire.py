"""Data contracts for the FIRE calculator endpoint."""

from __future__ import annotations

import math
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fireplan.core.net_worth import BalanceItem, calculate_net_worth


class FireRequest(BaseModel):
    """Inputs for a FIRE projection. Rates are percentages (4 means 4%)."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    annualExpenses: float = Field(..., ge=0, description="Annual spending in retirement.")
    withdrawalRate: float = Field(4.0, gt=0, le=100, description="Safe withdrawal rate in percent.")
    expectedReturn: float = Field(7.0, ge=-100, le=100, description="Expected annual return in percent.")
    monthlySavings: float = Field(2000.0, ge=0, description="Contribution added each month.")

    currentNetWorth: Optional[float] = None
    assets: List[BalanceItem] = Field(default_factory=list)
    liabilities: List[BalanceItem] = Field(default_factory=list)

    currentAge: Optional[int] = Field(default=None, ge=0, le=120)

    @model_validator(mode="after")
    def ensure_net_worth_source(self) -> "FireRequest":
        if self.currentNetWorth is None and not (self.assets or self.liabilities):
            raise ValueError("provide currentNetWorth or a list of assets/liabilities")
        if self.currentNetWorth is None and not math.isfinite(
            calculate_net_worth(self.assets, self.liabilities)
        ):
            raise ValueError("assets/liabilities total is out of range")
        return self


class FireResponse(BaseModel):
    """Projection result; non-finite values are reported as null."""

    fireNumber: Optional[float]
    yearsToFire: float = Field(..., ge=0, le=100)
    monthlySavingsNeeded: Optional[float]
    progressPercentage: float = Field(..., ge=0, le=100)
    projectedFireDate: date

    currentNetWorth: Optional[float]
    fireAge: Optional[int] = None
    underOneYear: bool
    savingsIncreaseNeeded: bool
    reachable: bool

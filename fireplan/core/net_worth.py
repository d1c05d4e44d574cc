"""Net worth from asset and liability balances."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field


class BalanceItem(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    name: str = ""
    value: float = Field(..., ge=0)


def calculate_net_worth(
    assets: Iterable[BalanceItem],
    liabilities: Iterable[BalanceItem],
) -> float:
    """Total asset value minus total liability value (can be negative)."""
    total_assets = sum(item.value for item in assets)
    total_liabilities = sum(item.value for item in liabilities)
    return float(total_assets - total_liabilities)

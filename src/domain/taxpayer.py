from __future__ import annotations

from decimal import Decimal
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

PayerId = NewType("PayerId", str)

PERIOD_SECONDS = 31_556_926  # 1 year
TAX_RATE = Decimal(5)  # percentage


class Taxpayer(BaseModel):
    """Tax obligation of one registered entity.

    ``income`` is overwritten only through the ledger and is not range-checked.
    ``tax_rate`` is fixed at registration.
    """

    income: Decimal
    last_paid: int = 0
    tax_rate: Decimal = Field(default=TAX_RATE, frozen=True)

    model_config = ConfigDict(validate_assignment=True)

    def next_due(self) -> int:
        return self.last_paid + PERIOD_SECONDS

    def amount_due(self) -> Decimal:
        return self.income * self.tax_rate / 100


class TaxDetails(BaseModel):
    income: Decimal
    last_paid: int
    tax_rate: Decimal

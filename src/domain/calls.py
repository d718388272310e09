from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, model_validator

from .taxpayer import PayerId


class Operation(StrEnum):
    REGISTER_TAXPAYER = "register_taxpayer"
    PAY_TAX = "pay_tax"
    UPDATE_INCOME = "update_income"
    GET_TAX_DETAILS = "get_tax_details"
    TRANSFER_ADMIN = "transfer_admin"


_REQUIRES_TARGET = {Operation.REGISTER_TAXPAYER, Operation.TRANSFER_ADMIN}
_REQUIRES_AMOUNT = {Operation.REGISTER_TAXPAYER, Operation.UPDATE_INCOME}
_REQUIRES_TIMESTAMP = {Operation.PAY_TAX}


class LedgerCall(BaseModel):
    """One invocation against the ledger, as recorded in a call log.

    ``target`` is the entity being registered or the new admin; ``amount`` is an income.
    """

    operation: Operation
    sender: PayerId
    target: PayerId | None = None
    amount: Decimal | None = None
    timestamp: int | None = None

    @model_validator(mode="after")
    def _validate_arguments(self) -> LedgerCall:
        if not self.sender:
            raise ValueError("LedgerCall.sender must be non-empty")
        if self.operation in _REQUIRES_TARGET and self.target is None:
            raise ValueError(f"{self.operation} requires a target")
        if self.operation in _REQUIRES_AMOUNT and self.amount is None:
            raise ValueError(f"{self.operation} requires an amount")
        if self.operation in _REQUIRES_TIMESTAMP and self.timestamp is None:
            raise ValueError(f"{self.operation} requires a timestamp")
        return self

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

from pydantic import BaseModel, model_validator

from domain.assessment import AssessmentError, AssessmentLedger, ErrorCode
from domain.calls import LedgerCall, Operation
from domain.taxpayer import PayerId


class Outcome(BaseModel):
    """Tagged result of a ledger call: a success value or an error code, never both."""

    value: Any = None
    error: ErrorCode | None = None

    @model_validator(mode="after")
    def _validate_exclusive(self) -> Outcome:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome must carry exactly one of value or error")
        return self

    @property
    def is_ok(self) -> bool:
        return self.error is None


class AssessmentContract:
    """Call surface over an ``AssessmentLedger`` that reports failures as error codes."""

    def __init__(self, ledger: AssessmentLedger) -> None:
        self._ledger = ledger

    @property
    def ledger(self) -> AssessmentLedger:
        return self._ledger

    def register_taxpayer(self, sender: PayerId, entity: PayerId, income: Decimal) -> Outcome:
        return self._invoke(self._ledger.register_taxpayer, sender, entity, income)

    def pay_tax(self, sender: PayerId, timestamp: int) -> Outcome:
        return self._invoke(self._ledger.pay_tax, sender, timestamp)

    def update_income(self, sender: PayerId, new_income: Decimal) -> Outcome:
        return self._invoke(self._ledger.update_income, sender, new_income)

    def get_tax_details(self, sender: PayerId) -> Outcome:
        return self._invoke(self._ledger.get_tax_details, sender)

    def transfer_admin(self, sender: PayerId, new_admin: PayerId) -> Outcome:
        return self._invoke(self._ledger.transfer_admin, sender, new_admin)

    def apply(self, call: LedgerCall) -> Outcome:
        if call.operation == Operation.REGISTER_TAXPAYER:
            assert call.target is not None and call.amount is not None
            return self.register_taxpayer(call.sender, call.target, call.amount)
        if call.operation == Operation.PAY_TAX:
            assert call.timestamp is not None
            return self.pay_tax(call.sender, call.timestamp)
        if call.operation == Operation.UPDATE_INCOME:
            assert call.amount is not None
            return self.update_income(call.sender, call.amount)
        if call.operation == Operation.GET_TAX_DETAILS:
            return self.get_tax_details(call.sender)
        if call.operation == Operation.TRANSFER_ADMIN:
            assert call.target is not None
            return self.transfer_admin(call.sender, call.target)
        raise ValueError(f"Unsupported operation: {call.operation}")

    @staticmethod
    def _invoke(operation: Callable[..., Any], *args: Any) -> Outcome:
        try:
            return Outcome(value=operation(*args))
        except AssessmentError as exc:
            return Outcome(error=exc.code)

from __future__ import annotations

import logging
from decimal import Decimal
from enum import IntEnum
from types import MappingProxyType

from .taxpayer import TAX_RATE, PayerId, TaxDetails, Taxpayer

logger = logging.getLogger(__name__)


class ErrorCode(IntEnum):
    NOT_AUTHORIZED = 100
    ALREADY_REGISTERED = 101
    NOT_REGISTERED = 102
    TOO_EARLY = 103


class AssessmentError(Exception):
    code: ErrorCode

    def __init__(self, message: str, *, sender: str) -> None:
        super().__init__(message)
        self.sender = sender


class NotAuthorizedError(AssessmentError):
    code = ErrorCode.NOT_AUTHORIZED

    def __init__(self, *, sender: str) -> None:
        super().__init__(f"Sender {sender} is not the ledger admin", sender=sender)


class AlreadyRegisteredError(AssessmentError):
    code = ErrorCode.ALREADY_REGISTERED

    def __init__(self, *, sender: str, entity: str) -> None:
        super().__init__(f"Taxpayer {entity} is already registered", sender=sender)
        self.entity = entity


class NotRegisteredError(AssessmentError):
    code = ErrorCode.NOT_REGISTERED

    def __init__(self, *, sender: str) -> None:
        super().__init__(f"Taxpayer {sender} is not registered", sender=sender)


class TooEarlyError(AssessmentError):
    code = ErrorCode.TOO_EARLY

    def __init__(self, *, sender: str, timestamp: int, due_time: int) -> None:
        super().__init__(
            f"Payment by {sender} at {timestamp} is before the due time {due_time}",
            sender=sender,
        )
        self.timestamp = timestamp
        self.due_time = due_time


class AssessmentLedger:
    """Single-admin register of taxpayers and their yearly tax obligations.

    Every operation takes the caller identity explicitly and either completes fully or
    raises an ``AssessmentError`` without touching state.
    """

    def __init__(self, *, admin: PayerId) -> None:
        self._admin = admin
        self._taxpayers: dict[PayerId, Taxpayer] = {}

    @property
    def admin(self) -> PayerId:
        return self._admin

    @property
    def taxpayers(self) -> MappingProxyType[PayerId, Taxpayer]:
        return MappingProxyType(self._taxpayers)

    def is_admin(self, sender: str) -> bool:
        return sender == self._admin

    def is_registered(self, entity: str) -> bool:
        return entity in self._taxpayers

    def register_taxpayer(self, sender: PayerId, entity: PayerId, income: Decimal) -> bool:
        if not self.is_admin(sender):
            raise NotAuthorizedError(sender=sender)
        if self.is_registered(entity):
            raise AlreadyRegisteredError(sender=sender, entity=entity)

        self._taxpayers[entity] = Taxpayer(income=income, last_paid=0, tax_rate=TAX_RATE)
        logger.info("Registered taxpayer %s with income %s", entity, income)
        return True

    def pay_tax(self, sender: PayerId, timestamp: int) -> Decimal:
        taxpayer = self._get(sender)

        due_time = taxpayer.next_due()
        if timestamp < due_time:
            raise TooEarlyError(sender=sender, timestamp=timestamp, due_time=due_time)

        amount_due = taxpayer.amount_due()
        taxpayer.last_paid = timestamp
        logger.info("Taxpayer %s paid %s at %d", sender, amount_due, timestamp)
        return amount_due

    def update_income(self, sender: PayerId, new_income: Decimal) -> bool:
        taxpayer = self._get(sender)
        taxpayer.income = new_income
        logger.info("Taxpayer %s income updated to %s", sender, new_income)
        return True

    def get_tax_details(self, sender: PayerId) -> TaxDetails:
        taxpayer = self._get(sender)
        return TaxDetails(income=taxpayer.income, last_paid=taxpayer.last_paid, tax_rate=taxpayer.tax_rate)

    def transfer_admin(self, sender: PayerId, new_admin: PayerId) -> bool:
        if not self.is_admin(sender):
            raise NotAuthorizedError(sender=sender)
        self._admin = new_admin
        logger.info("Admin role transferred from %s to %s", sender, new_admin)
        return True

    def _get(self, sender: PayerId) -> Taxpayer:
        taxpayer = self._taxpayers.get(sender)
        if taxpayer is None:
            raise NotRegisteredError(sender=sender)
        return taxpayer

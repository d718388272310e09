import pytest

from domain.assessment import AssessmentLedger
from services.assessment_contract import AssessmentContract
from tests.constants import ADMIN


@pytest.fixture(scope="function")
def ledger() -> AssessmentLedger:
    return AssessmentLedger(admin=ADMIN)


@pytest.fixture(scope="function")
def contract(ledger: AssessmentLedger) -> AssessmentContract:
    return AssessmentContract(ledger)

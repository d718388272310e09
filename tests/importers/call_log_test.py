from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from domain.calls import Operation
from importers.call_log import load_call_log
from tests.constants import ADMIN, USER


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "calls.csv"
    path.write_text(content)
    return path


def test_load_call_log_parses_rows_in_order(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "operation,sender,target,amount,timestamp\n"
        f"register_taxpayer,{ADMIN},{USER},100000,\n"
        f"pay_tax,{USER},,,31556927\n"
        f"get_tax_details, {USER} ,,,\n",
    )

    calls = load_call_log(path)

    assert [call.operation for call in calls] == [
        Operation.REGISTER_TAXPAYER,
        Operation.PAY_TAX,
        Operation.GET_TAX_DETAILS,
    ]
    assert calls[0].target == USER
    assert calls[0].amount == Decimal("100000")
    assert calls[0].timestamp is None
    assert calls[1].timestamp == 31556927
    assert calls[2].sender == USER


def test_load_call_log_missing_file_returns_empty(tmp_path: Path) -> None:
    assert load_call_log(tmp_path / "missing.csv") == []


def test_load_call_log_rejects_missing_columns(tmp_path: Path) -> None:
    path = _write(tmp_path, "operation,target\npay_tax,x\n")

    with pytest.raises(ValueError, match="sender"):
        load_call_log(path)


def test_load_call_log_rejects_empty_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "")

    with pytest.raises(ValueError, match="empty"):
        load_call_log(path)


def test_load_call_log_rejects_call_without_required_argument(tmp_path: Path) -> None:
    path = _write(tmp_path, f"operation,sender,timestamp\npay_tax,{USER},\n")

    with pytest.raises(ValidationError):
        load_call_log(path)


def test_load_call_log_rejects_unknown_operation(tmp_path: Path) -> None:
    path = _write(tmp_path, f"operation,sender\nrefund_tax,{USER}\n")

    with pytest.raises(ValidationError):
        load_call_log(path)


def test_load_call_log_rejects_short_row(tmp_path: Path) -> None:
    path = _write(tmp_path, "operation,sender,target\npay_tax\n")

    with pytest.raises(ValidationError):
        load_call_log(path)

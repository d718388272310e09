from decimal import Decimal
from pathlib import Path

import pytest

from config import AppSettings, config
from domain.assessment import ErrorCode
from main import main, run
from tests.constants import ADMIN, NEW_ADMIN, USER


def test_run_replays_call_log(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    calls_path = tmp_path / "calls.csv"
    calls_path.write_text(
        "operation,sender,target,amount,timestamp\n"
        f"register_taxpayer,{ADMIN},{USER},100000,\n"
        f"pay_tax,{USER},,,31556927\n"
        f"pay_tax,{USER},,,31556928\n"
        f"transfer_admin,{USER},{NEW_ADMIN},,\n"
    )

    replayed = run(calls_path, admin=ADMIN)

    outcomes = [outcome for _, outcome in replayed]
    assert outcomes[0].value is True
    assert outcomes[1].value == Decimal("5000")
    assert outcomes[2].error == ErrorCode.TOO_EARLY
    assert outcomes[3].error == ErrorCode.NOT_AUTHORIZED

    out = capsys.readouterr().out
    assert "Replayed 4 calls" in out
    assert "Tax collected: 5000.00" in out


def test_main_uses_admin_from_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("ASSESSMENT_ADMIN", NEW_ADMIN)
    config.cache_clear()
    try:
        calls_path = tmp_path / "calls.csv"
        calls_path.write_text(f"operation,sender,target,amount\nregister_taxpayer,{NEW_ADMIN},{USER},1000\n")

        main(["--calls", str(calls_path)])
    finally:
        config.cache_clear()

    out = capsys.readouterr().out
    assert f"Admin: {NEW_ADMIN}" in out
    assert "Calls succeeded: 1" in out


def test_app_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ASSESSMENT_ADMIN", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.assessment_admin == ADMIN
    assert settings.log_level == "INFO"

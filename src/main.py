from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from config import config
from domain.assessment import AssessmentLedger
from domain.calls import LedgerCall
from domain.taxpayer import PayerId
from importers.call_log import load_call_log
from services.assessment_contract import AssessmentContract, Outcome
from utils.ledger_summary import compute_ledger_summary, render_ledger_summary

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def run(calls_path: Path, *, admin: PayerId) -> list[tuple[LedgerCall, Outcome]]:
    ledger = AssessmentLedger(admin=admin)
    contract = AssessmentContract(ledger)

    calls = load_call_log(calls_path)
    replayed = [(call, contract.apply(call)) for call in calls]

    print(f"Replayed {len(calls)} calls from {calls_path}")
    render_ledger_summary(compute_ledger_summary(ledger, replayed))
    return replayed


def main(argv: Sequence[str] | None = None) -> None:
    settings = config()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    parser = argparse.ArgumentParser(description="Replay a call log against a fresh assessment ledger.")
    parser.add_argument("--calls", type=Path, default=PROJECT_ROOT / "data" / "calls.csv")
    parser.add_argument("--admin", default=settings.assessment_admin)
    args = parser.parse_args(argv)
    run(args.calls, admin=PayerId(args.admin))


if __name__ == "__main__":
    main()

from __future__ import annotations

import csv
import logging
from pathlib import Path

from domain.calls import LedgerCall

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"operation", "sender"}
OPTIONAL_COLUMNS = ("target", "amount", "timestamp")


def load_call_log(csv_path: Path) -> list[LedgerCall]:
    """Load a script of ledger calls from CSV.

    Each row should contain: operation,sender[,target][,amount][,timestamp]
    Empty cells are treated as absent; rows are returned in file order.
    """

    if not csv_path.exists():
        return []

    with csv_path.open() as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            raise ValueError(f"Call log {csv_path} is empty or missing headers")

        missing = REQUIRED_COLUMNS - set(reader.fieldnames)
        if missing:
            raise ValueError(f"Call log {csv_path} missing required columns: {', '.join(sorted(missing))}")

        calls: list[LedgerCall] = []
        for row in reader:
            payload = {
                "operation": (row.get("operation") or "").strip(),
                "sender": (row.get("sender") or "").strip(),
            }
            for column in OPTIONAL_COLUMNS:
                raw = (row.get(column) or "").strip()
                if raw:
                    payload[column] = raw
            calls.append(LedgerCall.model_validate(payload))

    logger.info("Loaded %d ledger calls from %s", len(calls), csv_path)
    return calls

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from domain.assessment import AssessmentLedger
from domain.calls import LedgerCall, Operation
from services.assessment_contract import Outcome

from .formatting import format_amount, format_rate


@dataclass
class TaxpayerRow:
    payer_id: str
    income: Decimal
    last_paid: int
    tax_rate: Decimal


@dataclass
class LedgerSummary:
    admin: str
    taxpayers: list[TaxpayerRow] = field(default_factory=list)
    succeeded: int = 0
    errors: dict[str, int] = field(default_factory=dict)
    tax_collected: Decimal = Decimal(0)


def compute_ledger_summary(
    ledger: AssessmentLedger,
    replayed: Iterable[tuple[LedgerCall, Outcome]] = (),
) -> LedgerSummary:
    succeeded = 0
    errors: Counter[str] = Counter()
    tax_collected = Decimal(0)

    for call, outcome in replayed:
        if outcome.error is not None:
            errors[outcome.error.name] += 1
            continue
        succeeded += 1
        if call.operation == Operation.PAY_TAX:
            tax_collected += outcome.value

    rows = [
        TaxpayerRow(
            payer_id=payer_id,
            income=taxpayer.income,
            last_paid=taxpayer.last_paid,
            tax_rate=taxpayer.tax_rate,
        )
        for payer_id, taxpayer in sorted(ledger.taxpayers.items(), key=lambda item: item[0])
    ]

    return LedgerSummary(
        admin=ledger.admin,
        taxpayers=rows,
        succeeded=succeeded,
        errors=dict(sorted(errors.items())),
        tax_collected=tax_collected,
    )


def render_ledger_summary(summary: LedgerSummary) -> None:
    print(f"Admin: {summary.admin}")
    print(f"Calls succeeded: {summary.succeeded}")
    for name, count in summary.errors.items():
        print(f"Calls rejected ({name}): {count}")
    print(f"Tax collected: {format_amount(summary.tax_collected)}")

    print("Taxpayers:")
    if not summary.taxpayers:
        print("  (empty)")
        return

    rows: list[tuple[str, str, str, str]] = []
    for taxpayer in summary.taxpayers:
        rows.append(
            (
                taxpayer.payer_id,
                format_amount(taxpayer.income),
                str(taxpayer.last_paid),
                format_rate(taxpayer.tax_rate),
            )
        )

    labels = ("Taxpayer", "Income", "Last paid", "Rate")
    widths = [max(len(label), max(len(row[i]) for row in rows)) for i, label in enumerate(labels)]

    header = f"{labels[0]:<{widths[0]}} " + " ".join(f"{labels[i]:>{widths[i]}}" for i in range(1, len(labels)))
    lines = [header, "-" * len(header)]
    for row in rows:
        lines.append(f"{row[0]:<{widths[0]}} " + " ".join(f"{row[i]:>{widths[i]}}" for i in range(1, len(row))))
    lines.append("-" * len(header))
    print("\n".join(lines))

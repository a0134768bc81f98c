from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PayrollRow:
    """Read-model: one person's hours and pay for a period (not persisted)."""

    person_id: int
    name: str
    role: str
    hourly_rate: Decimal
    total_hours: Decimal
    pay: Decimal


@dataclass(frozen=True)
class PayrollReport:
    rows: tuple[PayrollRow, ...]
    grand_total: Decimal

    def as_records(self) -> list[dict]:
        """Flat record set used by the CSV export."""
        return [
            {
                "FacultyID": str(r.person_id),
                "Name": r.name,
                "Role": r.role,
                "Rate/hr": f"{r.hourly_rate:.2f}",
                "TotalHours": f"{r.total_hours:.2f}",
                "Pay": f"{r.pay:.2f}",
            }
            for r in self.rows
        ]

    def as_dict(self) -> dict:
        return {
            "rows": [
                {
                    "person_id": r.person_id,
                    "name": r.name,
                    "role": r.role,
                    "hourly_rate": f"{r.hourly_rate:.2f}",
                    "total_hours": f"{r.total_hours:.2f}",
                    "pay": f"{r.pay:.2f}",
                }
                for r in self.rows
            ],
            "grand_total": f"{self.grand_total:.2f}",
        }


RECORD_FIELDS = ["FacultyID", "Name", "Role", "Rate/hr", "TotalHours", "Pay"]

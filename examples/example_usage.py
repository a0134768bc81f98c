"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; scanning and payroll live in the services.
"""

import importlib

from config import get_settings_module

from dtr_payroll.container import build_container
from dtr_payroll.settings import load_settings


def main():
    settings = load_settings(importlib.import_module(get_settings_module()))
    container = build_container(settings)

    people = container.person_service.list_people(active_only=True)
    if people:
        result = container.attendance_service.record_scan(people[0].person_id)
        print(people[0].name, result.action.label, result.timestamp)

    report = container.payroll_report_service.compute_report()
    for row in report.rows:
        print(row.person_id, row.name, row.total_hours, row.pay)
    print("Grand total:", report.grand_total)


if __name__ == "__main__":
    main()

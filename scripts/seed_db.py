from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from dtr_payroll.container import build_container
from dtr_payroll.settings import load_settings

DEMO_FACULTY = [
    ("Maria Santos", "Instructor", "150.00"),
    ("Jose Reyes", "Lab Assistant", "95.50"),
    ("Ana Cruz", "Guidance Counselor", "120.00"),
]


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings(importlib.import_module(get_settings_module()))
    container = build_container(settings)
    base_url = settings.public_base_url or "http://localhost:8080"

    existing = {p.name for p in container.person_service.list_people()}
    for name, role, rate in DEMO_FACULTY:
        if name in existing:
            continue
        person = container.person_service.register(name=name, role=role, hourly_rate=rate)
        print(f"Registered {person.name}: {container.person_service.scan_url(base_url, person)}")

    print(f"OK: Seeded database -> {settings.db.database}")


if __name__ == "__main__":
    main()

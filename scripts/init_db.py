from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from dtr_payroll.database.bootstrap import apply_schema, list_tables
from dtr_payroll.main import SCHEMA_PATH
from dtr_payroll.settings import load_settings


def main() -> None:
    load_dotenv(override=False)
    db = load_settings(importlib.import_module(get_settings_module())).db

    apply_schema(db, schema_path=SCHEMA_PATH)
    print(f"OK: {db.user}@{db.host}:{db.port}/{db.database} tables={', '.join(list_tables(db))}")


if __name__ == "__main__":
    main()

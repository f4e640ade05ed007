from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.offboarding_system.offboarding_system.database.bootstrap import SCHEMA_PATH, apply_schema, list_tables
from src.offboarding_system.offboarding_system.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    target = DBConfig.from_dict(dict(settings.DB_CONFIG))

    apply_schema(target, schema_path=SCHEMA_PATH)
    tables = list_tables(target)
    print(f"OK: Applied schema.sql -> {target.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()

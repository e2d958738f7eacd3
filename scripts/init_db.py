from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from visitor_log.database.bootstrap import apply_schema, list_tables


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_path = str(settings.DB_PATH)

    apply_schema(db_path)
    tables = list_tables(db_path)
    print(f"OK: Applied schema -> {db_path} (tables={', '.join(tables)})")


if __name__ == "__main__":
    main()

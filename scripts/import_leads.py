"""
scripts/import_leads.py — CLI to load a CSV of leads into the database.

Usage:
    python scripts/import_leads.py leads.csv
"""

import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from leadscore.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("import_leads")

from leadscore.db.session import get_session
from leadscore.db.repository import count_leads
from leadscore.errors import ValidationError
from leadscore.services.lead_service import import_leads_csv


def run(path: str) -> int:
    print("\n" + "=" * 55)
    print("  📥  Lead Scoring — CSV Import")
    print("=" * 55)

    print(f"\n[1/2] 📄 Reading {path}...")
    try:
        with open(path, "rb") as fh:
            content = fh.read()
    except OSError as exc:
        print(f"      ❌ Could not read file: {exc}")
        return 1

    print("\n[2/2] 💾 Saving leads (duplicates skipped)...")
    try:
        with get_session() as db:
            report = import_leads_csv(db, content)
            total = count_leads(db)
    except ValidationError as exc:
        print(f"      ❌ {exc}")
        return 1

    print(f"      ✅ Received {report.received} rows: "
          f"{report.created} created, {report.skipped} skipped.")
    print(f"      📊 {total} leads now stored.")

    print("\n" + "=" * 55)
    print("  🎉 Import complete!")
    print("=" * 55 + "\n")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Import leads from a CSV file.")
    parser.add_argument("csv_path", help="Path to a CSV with name, role, company, industry, location, linkedIn_bio")
    args = parser.parse_args()
    sys.exit(run(args.csv_path))


if __name__ == "__main__":
    main()

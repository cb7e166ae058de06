"""
scripts/run_scoring.py — CLI to score all leads against an offer.

Steps:
  1. Look up the offer and all stored leads
  2. Skip leads already scored for this offer
  3. Rule score + AI intent classification for the rest
  4. Print the report, optionally export results to CSV

Usage:
    python scripts/run_scoring.py <offer_id> [--csv results.csv]
"""

import argparse
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from leadscore.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ── Imports ───────────────────────────────────────────────────────────────────

from leadscore.db.session import get_session
from leadscore.errors import AIProviderOverloaded, NotFoundError
from leadscore.services.lead_service import score_leads_for_offer
from leadscore.services.reporting import get_offer_results, results_to_csv


# ── Entry point ───────────────────────────────────────────────────────────────

def main():
    parser = argparse.ArgumentParser(description="Lead Scoring — score leads for an offer")
    parser.add_argument("offer_id", help="ID of the offer to score against")
    parser.add_argument(
        "--csv",
        dest="csv_path",
        default=None,
        help="Write the offer's results to this CSV file after scoring",
    )
    args = parser.parse_args()

    print("\n" + "=" * 55)
    print(f"  🎯  Lead Scoring — offer {args.offer_id}")
    print("=" * 55 + "\n")

    try:
        with get_session() as db:
            report = score_leads_for_offer(db, args.offer_id)
            rows = get_offer_results(db, args.offer_id) if args.csv_path else []
    except NotFoundError as exc:
        print(f"  ❌ {exc}")
        sys.exit(1)
    except AIProviderOverloaded as exc:
        print(f"  ⚠️  AI model overloaded, try again later ({exc}).")
        sys.exit(2)

    print("\n" + "=" * 55)
    print("  ✅  Scoring complete!")
    print(f"     Created : {report.created}")
    print(f"     Skipped : {report.skipped}")
    print(f"     Failed  : {len(report.failed)}")
    for failure in report.failed:
        print(f"       - lead {failure.lead_id}: {failure.error}")
    print("=" * 55 + "\n")

    if args.csv_path:
        with open(args.csv_path, "w", encoding="utf-8", newline="") as fh:
            fh.write(results_to_csv(rows))
        print(f"  💾 Results written to {args.csv_path} ({len(rows)} rows)\n")


if __name__ == "__main__":
    main()

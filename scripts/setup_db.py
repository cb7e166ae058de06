"""
scripts/setup_db.py — Initialize the database schema.

Run once before starting the application for the first time:
    python scripts/setup_db.py

This creates all tables defined in leadscore/db/models.py directly via
SQLAlchemy metadata, including the (lead_id, offer_id) unique constraint
on scores that backs idempotent scoring.
"""

import sys
import os

# Ensure the project root is on the path so we can import `leadscore`
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import inspect, text

from leadscore.db.session import engine
from leadscore.db.models import Base


def setup_db() -> int:
    url = engine.url.render_as_string(hide_password=True)
    print(f"🔌 Connecting to {url} ...")

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    print("✅ Connection successful.")

    print("\n📦 Creating offers / leads / scores tables if missing...")
    Base.metadata.create_all(bind=engine)

    present = set(inspect(engine).get_table_names())
    missing = sorted(set(Base.metadata.tables) - present)
    if missing:
        print(f"❌ Tables still missing: {missing}")
        return 1

    print(f"✅ Tables ready: {sorted(Base.metadata.tables)}")
    print("\n🎉 Database setup complete!")
    return 0


if __name__ == "__main__":
    sys.exit(setup_db())

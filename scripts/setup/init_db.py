# scripts/setup/init_db.py
"""
Initialize the store: creates the JSON document or all SQL tables and
runs the startup maintenance passes (user normalization, note clean-up,
sample vehicles).
Run once before first launch, or after adding new models.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect

from autopark.config import settings
from autopark.services.maintenance_service import run_startup_maintenance
from autopark.store import build_store


def main():
    print("🗄️  Autopark store initialization")
    print("=" * 40)
    print(f"📡 Backend: {settings.STORE_BACKEND}")
    if settings.STORE_BACKEND == "json":
        print(f"📄 File: {settings.DATA_FILE}")
    elif settings.STORE_BACKEND == "sql":
        print(f"📡 Database: {settings.DATABASE_URL}")

    try:
        store = build_store(settings)
        store.ping()
        print("✅ Store connection OK")
    except Exception as e:
        print(f"❌ Cannot open store: {e}")
        print("\nCheck STORE_BACKEND / DATA_FILE / DATABASE_URL in .env")
        sys.exit(1)

    print("\n📋 Running maintenance passes...")
    report = run_startup_maintenance(store, settings)
    for key, value in report.items():
        print(f"   ✓ {key}: {value}")

    if store.backend == "sql":
        tables = sorted(inspect(store.engine).get_table_names())
        print(f"\n📊 Tables in database ({len(tables)} total):")
        for t in tables:
            print(f"   ✓ {t}")

    print("\n🎉 Store ready! You can now start the backend:")
    print(f"   uvicorn autopark.main:app --host 0.0.0.0 --port {settings.BACKEND_PORT} --reload")


if __name__ == "__main__":
    main()

# scripts/setup/create_superadmin.py
"""
First-run setup: create (or promote) the superadmin account.
Does nothing if a superadmin already exists.

Usage:
  python scripts/setup/create_superadmin.py --email admin@local --password 'ChangeMe123!'
  (or set SUPERADMIN_EMAIL / SUPERADMIN_PASSWORD in .env)
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import argparse

from autopark.config import settings
from autopark.services.errors import ServiceError
from autopark.services.user_service import ensure_superadmin
from autopark.store import build_store


def main():
    parser = argparse.ArgumentParser(description="Create or promote the Autopark superadmin")
    parser.add_argument("--email", default=settings.SUPERADMIN_EMAIL)
    parser.add_argument("--password", default=settings.SUPERADMIN_PASSWORD)
    args = parser.parse_args()

    print("👤 Autopark superadmin setup")
    print("=" * 40)
    store = build_store(settings)
    try:
        user = ensure_superadmin(store, args.email, args.password)
    except ServiceError as e:
        print(f"❌ {e.detail}")
        sys.exit(1)

    if user is None:
        print("✅ A superadmin already exists, nothing to do")
    else:
        print(f"✅ Superadmin ready: {user.email} (id={user.id})")


if __name__ == "__main__":
    main()

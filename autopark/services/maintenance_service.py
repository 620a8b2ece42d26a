# autopark/services/maintenance_service.py
"""
Clean-up passes run once on startup. Each pass is idempotent, so running
them on every boot is safe.
"""

from autopark.services.trip_service import sanitize_trip_notes
from autopark.services.user_service import ensure_superadmin, normalize_users
from autopark.services.vehicle_service import seed_sample_vehicles
from autopark.store.base import Store
from autopark.utils.logger import get_logger

logger = get_logger(__name__)


def run_startup_maintenance(store: Store, config) -> dict:
    """Run every startup pass and return what each one changed."""
    report = {
        "users_normalized": normalize_users(store),
        "trip_notes_sanitized": sanitize_trip_notes(store),
        "vehicles_seeded": seed_sample_vehicles(store) if config.SEED_SAMPLE_VEHICLES else 0,
        "superadmin": None,
    }
    if config.BOOTSTRAP_SUPERADMIN:
        user = ensure_superadmin(store, config.SUPERADMIN_EMAIL, config.SUPERADMIN_PASSWORD)
        report["superadmin"] = user.email if user else None
    logger.info(f"Startup maintenance done: {report}")
    return report

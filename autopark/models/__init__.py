# Autopark: Database Models (sql store backend)
# Import all models here for SQLAlchemy discovery

from autopark.models.vehicle import VehicleRow                  # noqa
from autopark.models.driver import DriverRow                    # noqa
from autopark.models.user import UserRow                        # noqa
from autopark.models.trip import TripRow                        # noqa
from autopark.models.dispatch_request import DispatchRequestRow  # noqa

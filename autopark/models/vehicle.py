# autopark/models/vehicle.py
"""
Vehicles table. status is one of base | trip | repair; the dispatch
lifecycle flips it between base and trip.
"""

from sqlalchemy import Column, Float, Integer, String, Text
from autopark.database import Base


class VehicleRow(Base):
    __tablename__ = "vehicles"

    id = Column(String(64), primary_key=True)
    make = Column(String(100), nullable=False, default="")
    model = Column(String(100), nullable=False, default="")
    type = Column(String(100), nullable=False, default="")
    status = Column(String(20), nullable=False, default="base", index=True)
    assigned_unit = Column(String(200), nullable=False, default="")
    vin = Column(String(100))
    registration_number = Column(String(50))
    year = Column(Integer)
    mileage = Column(Float)
    notes = Column(Text)

    def __repr__(self):
        return f"<Vehicle {self.id} {self.make} {self.model} status={self.status}>"

# autopark/models/trip.py
"""
Trip log. Append-only; the dispatch lifecycle adds zero-distance rows
when a request starts and when it finishes.
"""

from sqlalchemy import Column, DateTime, Float, String, Text
from autopark.database import Base


class TripRow(Base):
    __tablename__ = "trips"

    id = Column(String(64), primary_key=True)
    driver_id = Column(String(64), nullable=False, index=True)
    vehicle_id = Column(String(64), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    distance_km = Column(Float, nullable=False, default=0)
    notes = Column(Text, nullable=False, default="")

    def __repr__(self):
        return f"<Trip {self.id} vehicle={self.vehicle_id} driver={self.driver_id} km={self.distance_km}>"

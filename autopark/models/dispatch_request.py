# autopark/models/dispatch_request.py
"""Dispatch requests table (planned outings)."""

from sqlalchemy import Column, DateTime, Float, String, Text
from autopark.database import Base


class DispatchRequestRow(Base):
    __tablename__ = "requests"

    id = Column(String(64), primary_key=True)
    vehicle_id = Column(String(64), nullable=False)   # not a FK: references may outlive the vehicle
    driver_id = Column(String(64), nullable=False)
    from_ = Column("from_place", String(255), nullable=False)
    to = Column("to_place", String(255), nullable=False)
    depart_at = Column(DateTime(timezone=True), nullable=False)
    arrive_at = Column(DateTime(timezone=True))
    kilometers = Column(Float)
    status = Column(String(20), nullable=False, default="planned", index=True)
    notes = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True))

    def __repr__(self):
        return f"<DispatchRequest {self.id} {self.from_}->{self.to} status={self.status}>"

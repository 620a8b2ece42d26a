# autopark/models/driver.py
from sqlalchemy import Column, String, Text
from autopark.database import Base


class DriverRow(Base):
    __tablename__ = "drivers"

    id = Column(String(64), primary_key=True)
    first_name = Column(String(100), nullable=False, default="")
    last_name = Column(String(100), nullable=False, default="")
    license_number = Column(String(50), nullable=False, default="")
    rank = Column(String(100))
    phone = Column(String(50))
    notes = Column(Text)
    photo_url = Column(String(500))
    position = Column(String(100))
    email = Column(String(255))

    def __repr__(self):
        return f"<Driver {self.id} {self.last_name} {self.first_name}>"

# autopark/models/user.py
"""
Users table. Registration creates a pending row; admins approve or
reject it. Emails are stored lowercase.
"""

from sqlalchemy import Column, DateTime, String
from autopark.database import Base


class UserRow(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    email = Column(String(255), nullable=False, default="", index=True)
    name = Column(String(300), nullable=False, default="")
    role = Column(String(20), nullable=False, default="user")          # user | admin | superadmin
    position = Column(String(100))
    status = Column(String(20))                                       # active | pending | rejected
    password_hash = Column(String(255))
    created_at = Column(DateTime(timezone=True))

    def __repr__(self):
        return f"<User {self.id} {self.email} role={self.role} status={self.status}>"

"""
Модель администратора
"""
from sqlalchemy import Column, Integer, String, TIMESTAMP
from sqlalchemy.sql import func
from ..database import Base


class AdminUser(Base):
    """Учётная запись админ-панели"""

    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password = Column(String(100), nullable=False)  # bcrypt hash
    created_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self):
        return f"<AdminUser {self.username}>"

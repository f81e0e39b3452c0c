"""
Модель мастера
"""
from sqlalchemy import CheckConstraint, Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..database import Base


class Master(Base):
    """Мастер барбершопа"""

    __tablename__ = "masters"
    __table_args__ = (
        CheckConstraint("experience IS NULL OR experience >= 0", name="ck_masters_experience_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    specialty = Column(String(100), nullable=True)
    experience = Column(Integer, nullable=True)  # лет, >= 0
    description = Column(Text, nullable=True)
    icon = Column(String(50), nullable=True)
    photo_url = Column(String(255), nullable=True)  # /uploads/masters/...
    created_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self):
        return f"<Master {self.name}>"

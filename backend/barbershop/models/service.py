"""
Модель услуги
"""
from sqlalchemy import CheckConstraint, Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..database import Base


class Service(Base):
    """Услуга барбершопа"""

    __tablename__ = "services"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_services_price_positive"),
        CheckConstraint("duration > 0", name="ck_services_duration_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Integer, nullable=False)  # в валюте, > 0
    duration = Column(Integer, nullable=False)  # минуты, > 0
    icon = Column(String(50), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self):
        return f"<Service {self.name} ({self.price})>"

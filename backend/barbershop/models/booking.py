"""
Модель записи клиента
"""
import enum

from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..database import Base


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(Base):
    """Запись с сайта. Услуга и мастер хранятся текстом, без внешних ключей"""

    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    client_name = Column(String(100), nullable=False)
    client_phone = Column(String(20), nullable=False, index=True)
    client_email = Column(String(100), nullable=True)
    service = Column(String(200), nullable=False)
    master = Column(String(100), nullable=True)
    booking_date = Column(String(20), nullable=False)
    booking_time = Column(String(10), nullable=False)
    status = Column(String(20), default=BookingStatus.PENDING.value, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self):
        return f"<Booking {self.client_name} - {self.service} ({self.status})>"

"""
API роутер записей клиентов

Создание записи публичное, просмотр и изменение только для администратора.
Уведомления о записях не отправляются.
"""
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.booking import Booking, BookingStatus
from ..security import AdminIdentity, get_current_admin
from ..services.store import commit, create_row, delete_row, get_or_404, merge_update
from ..validators import required_text

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/bookings", tags=["bookings"])


# ==================== Pydantic Schemas ====================

class BookingCreate(BaseModel):
    client_name: str
    client_phone: str
    client_email: Optional[str] = None
    service: str
    master: Optional[str] = None
    booking_date: str
    booking_time: str
    notes: Optional[str] = None

    @field_validator("client_name", "client_phone", "service", "booking_date", "booking_time")
    @classmethod
    def check_required(cls, value, info):
        return required_text(value, info.field_name)


class BookingUpdate(BaseModel):
    status: Optional[BookingStatus] = None
    notes: Optional[str] = None


class BookingResponse(BaseModel):
    id: int
    client_name: str
    client_phone: str
    client_email: Optional[str]
    service: str
    master: Optional[str]
    booking_date: str
    booking_time: str
    status: str
    notes: Optional[str]
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== API Endpoints ====================

@router.get("", response_model=List[BookingResponse])
async def get_bookings(
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    return db.query(Booking).order_by(
        Booking.booking_date.desc(), Booking.booking_time.desc()
    ).all()


@router.post("", response_model=BookingResponse)
async def create_booking(data: BookingCreate, db: Session = Depends(get_db)):
    """Запись с сайта, статус по умолчанию pending"""
    booking = create_row(db, Booking(**data.model_dump(), status=BookingStatus.PENDING.value))
    logger.info(f"Новая запись #{booking.id}: {booking.service} {booking.booking_date} {booking.booking_time}")
    return booking


@router.put("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: int,
    data: BookingUpdate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """Изменить статус и/или заметку"""
    booking = get_or_404(db, Booking, booking_id, "Запись не найдена")
    merge_update(booking, data)
    commit(db)
    db.refresh(booking)
    return booking


@router.delete("/{booking_id}")
async def delete_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    booking = get_or_404(db, Booking, booking_id, "Запись не найдена")
    delete_row(db, booking)
    return {"message": "Запись удалена"}

"""
API роутер услуг
"""
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.service import Service
from ..security import AdminIdentity, get_current_admin
from ..services.store import commit, create_row, delete_row, get_or_404, replace_update
from ..validators import positive_int, required_text

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/services", tags=["services"])


# ==================== Pydantic Schemas ====================

class ServiceFields(BaseModel):
    """Поля услуги. PUT требует полный набор, как и POST"""
    name: str
    description: Optional[str] = None
    price: StrictInt
    duration: StrictInt
    icon: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return required_text(value, "name")

    @field_validator("price")
    @classmethod
    def check_price(cls, value):
        return positive_int(value, "Цена должна быть положительным числом")

    @field_validator("duration")
    @classmethod
    def check_duration(cls, value):
        return positive_int(value, "Длительность должна быть положительным числом")


class ServiceResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    price: int
    duration: int
    icon: Optional[str]
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== API Endpoints ====================

@router.get("", response_model=List[ServiceResponse])
async def get_services(db: Session = Depends(get_db)):
    """Список услуг по порядку добавления"""
    return db.query(Service).order_by(Service.id.asc()).all()


@router.post("", response_model=ServiceResponse)
async def create_service(
    data: ServiceFields,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    service = create_row(db, Service(**data.model_dump()))
    logger.info(f"Добавлена услуга #{service.id} {service.name}")
    return service


@router.put("/{service_id}", response_model=ServiceResponse)
async def update_service(
    service_id: int,
    data: ServiceFields,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """Полная замена полей услуги"""
    service = get_or_404(db, Service, service_id, "Услуга не найдена")
    replace_update(service, data)
    commit(db)
    db.refresh(service)
    return service


@router.delete("/{service_id}")
async def delete_service(
    service_id: int,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    service = get_or_404(db, Service, service_id, "Услуга не найдена")
    delete_row(db, service)
    logger.info(f"Удалена услуга #{service_id}")
    return {"message": "Услуга удалена"}

"""
API роутер мастеров
"""
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.master import Master
from ..security import AdminIdentity, get_current_admin
from ..services.store import commit, create_row, delete_row, get_or_404, merge_update
from ..storage import FileStorage, get_storage
from ..validators import non_negative_int, required_text

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/masters", tags=["masters"])

EXPERIENCE_MESSAGE = "Опыт должен быть неотрицательным числом"


# ==================== Pydantic Schemas ====================

class MasterCreate(BaseModel):
    name: str
    specialty: Optional[str] = None
    experience: Optional[StrictInt] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    photo_url: Optional[str] = None  # путь из /upload-master-photo

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        return required_text(value, "name")

    @field_validator("experience")
    @classmethod
    def check_experience(cls, value):
        return non_negative_int(value, EXPERIENCE_MESSAGE)


class MasterUpdate(BaseModel):
    """Частичное обновление: непереданные поля сохраняют текущие значения"""
    name: Optional[str] = None
    specialty: Optional[str] = None
    experience: Optional[StrictInt] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    photo_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value):
        if value is None:
            return value
        return required_text(value, "name")

    @field_validator("experience")
    @classmethod
    def check_experience(cls, value):
        return non_negative_int(value, EXPERIENCE_MESSAGE)


class MasterResponse(BaseModel):
    id: int
    name: str
    specialty: Optional[str]
    experience: Optional[int]
    description: Optional[str]
    icon: Optional[str]
    photo_url: Optional[str]
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ==================== API Endpoints ====================

@router.get("", response_model=List[MasterResponse])
async def get_masters(db: Session = Depends(get_db)):
    return db.query(Master).order_by(Master.id.asc()).all()


@router.post("", response_model=MasterResponse)
async def create_master(
    data: MasterCreate,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """Добавить мастера (фото загружается заранее через /upload-master-photo)"""
    master = create_row(db, Master(**data.model_dump()))
    logger.info(f"Добавлен мастер #{master.id} {master.name}")
    return master


@router.put("/{master_id}", response_model=MasterResponse)
async def update_master(
    master_id: int,
    data: MasterUpdate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """Частичное обновление мастера"""
    master = get_or_404(db, Master, master_id, "Мастер не найден")
    old_photo = master.photo_url

    merge_update(master, data)
    commit(db)
    db.refresh(master)

    # Старое фото больше ни на что не ссылается
    if old_photo and old_photo != master.photo_url:
        background_tasks.add_task(storage.remove, old_photo)

    return master


@router.delete("/{master_id}")
async def delete_master(
    master_id: int,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """Удалить мастера и его фото"""
    master = get_or_404(db, Master, master_id, "Мастер не найден")
    photo_url = master.photo_url
    delete_row(db, master)

    if photo_url:
        background_tasks.add_task(storage.remove, photo_url)

    logger.info(f"Удалён мастер #{master_id}")
    return {"message": "Мастер удалён"}

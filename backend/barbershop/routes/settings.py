"""
API роутер настроек сайта
"""
from typing import Dict, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..security import AdminIdentity, get_current_admin
from ..services import settings_store

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=Dict[str, Optional[str]])
async def get_settings_map(db: Session = Depends(get_db)):
    """Все настройки в виде {ключ: значение}"""
    return settings_store.get_all(db)


@router.put("")
async def update_settings(
    data: Dict[str, Optional[str]],
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """Обновить переданные ключи, остальные не меняются"""
    settings_store.upsert_many(db, data)
    return {"message": "Настройки сохранены", "settings": data}

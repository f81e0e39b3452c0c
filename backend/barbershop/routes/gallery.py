"""
API роутер галереи работ
"""
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, File, UploadFile
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from ..database import get_db
from ..errors import StoreError
from ..models.gallery_item import GalleryItem
from ..security import AdminIdentity, get_current_admin
from ..services.store import create_row, delete_row, get_or_404
from ..storage import FileStorage, get_storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/gallery", tags=["gallery"])


class GalleryItemResponse(BaseModel):
    id: int
    image_url: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


@router.get("", response_model=List[GalleryItemResponse])
async def get_gallery(db: Session = Depends(get_db)):
    """Фото галереи, новые первыми"""
    return db.query(GalleryItem).order_by(
        GalleryItem.created_at.desc(), GalleryItem.id.desc()
    ).all()


@router.post("", response_model=GalleryItemResponse)
async def upload_gallery_image(
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """
    Загрузить фото в галерею

    Сначала файл пишется на диск, затем создаётся запись.
    Если запись не сохранилась, файл удаляется.
    """
    image_url = await storage.save_gallery_image(image)

    try:
        item = create_row(db, GalleryItem(image_url=image_url))
    except StoreError:
        if not storage.remove(image_url):
            logger.warning(f"Файл {image_url} остался без записи в галерее")
        raise

    logger.info(f"Добавлено фото #{item.id} в галерею")
    return item


@router.delete("/{item_id}")
async def delete_gallery_image(
    item_id: int,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
    admin: AdminIdentity = Depends(get_current_admin)
):
    item = get_or_404(db, GalleryItem, item_id, "Изображение не найдено")
    image_url = item.image_url
    delete_row(db, item)

    background_tasks.add_task(storage.remove, image_url)
    return {"message": "Изображение удалено"}

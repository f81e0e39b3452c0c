"""
Загрузка фото мастеров
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from ..security import AdminIdentity, get_current_admin
from ..storage import FileStorage, get_storage

router = APIRouter(tags=["uploads"])


@router.post("/upload-master-photo")
async def upload_master_photo(
    photo: Optional[UploadFile] = File(None),
    storage: FileStorage = Depends(get_storage),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """
    Сохранить фото и вернуть путь к нему.
    Таблицу мастеров не трогает: путь передаётся в POST/PUT /masters как photo_url.
    """
    path = await storage.save_master_photo(photo)
    return {"success": True, "path": path}

"""
Хранилище загруженных изображений на диске

Структура каталога UPLOAD_DIR:
    gallery/  - фото галереи
    masters/  - фото мастеров
Файлы раздаются по префиксу /uploads (см. main.py).
"""
import logging
import re
import secrets
import time
from pathlib import Path
from typing import Optional

from fastapi import Depends, UploadFile

from .config import Settings, get_settings
from .errors import PayloadTooLarge, UnsupportedMediaType, ValidationError

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"
GALLERY_SUBDIR = "gallery"
MASTERS_SUBDIR = "masters"

ALLOWED_IMAGE_TYPES = {"jpeg", "jpg", "png", "gif", "webp"}
CHUNK_SIZE = 64 * 1024


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def sanitize_base_name(filename: str, max_length: int = 40) -> str:
    """Имя файла без расширения, только [a-zA-Z0-9_-], не длиннее max_length"""
    stem = Path(filename).stem
    return re.sub(r"[^a-zA-Z0-9_-]", "_", stem)[:max_length]


def image_extension(filename: Optional[str], content_type: Optional[str]) -> str:
    """
    Проверить расширение и MIME-тип по белому списку

    Returns:
        str: расширение в нижнем регистре с точкой, например ".jpg"
    """
    ext = Path(filename or "").suffix.lower()
    mime = (content_type or "").lower()
    mime_major, _, mime_minor = mime.partition("/")

    if ext.lstrip(".") not in ALLOWED_IMAGE_TYPES:
        raise UnsupportedMediaType()
    if mime_major != "image" or mime_minor not in ALLOWED_IMAGE_TYPES:
        raise UnsupportedMediaType()
    return ext


class FileStorage:
    """Сохранение и удаление загруженных файлов"""

    def __init__(self, root: Path, max_bytes: int):
        self.root = Path(root)
        self.max_bytes = max_bytes
        self.gallery_dir = self.root / GALLERY_SUBDIR
        self.masters_dir = self.root / MASTERS_SUBDIR

    def ensure_dirs(self) -> None:
        self.gallery_dir.mkdir(parents=True, exist_ok=True)
        self.masters_dir.mkdir(parents=True, exist_ok=True)

    async def read_limited(self, upload: UploadFile) -> bytes:
        """Прочитать файл целиком, прерываясь при превышении лимита"""
        data = bytearray()
        while True:
            chunk = await upload.read(CHUNK_SIZE)
            if not chunk:
                break
            data.extend(chunk)
            if len(data) > self.max_bytes:
                raise PayloadTooLarge(
                    f"Файл больше {self.max_bytes // (1024 * 1024)} МБ"
                )
        return bytes(data)

    async def _save(self, upload: Optional[UploadFile], subdir: str, filename_for) -> str:
        if upload is None or not upload.filename:
            raise ValidationError("Файл не загружен")

        ext = image_extension(upload.filename, upload.content_type)
        content = await self.read_limited(upload)

        directory = self.root / subdir
        directory.mkdir(parents=True, exist_ok=True)
        filename = filename_for(upload.filename, ext)
        (directory / filename).write_bytes(content)

        public_path = f"{PUBLIC_PREFIX}/{subdir}/{filename}"
        logger.info(f"Сохранён файл {public_path} ({len(content)} байт)")
        return public_path

    async def save_gallery_image(self, upload: Optional[UploadFile]) -> str:
        """Сохранить фото галереи, вернуть публичный путь"""
        return await self._save(
            upload,
            GALLERY_SUBDIR,
            lambda original, ext: f"gallery-{_timestamp_ms()}-{secrets.randbelow(10**9)}{ext}",
        )

    async def save_master_photo(self, upload: Optional[UploadFile]) -> str:
        """Сохранить фото мастера; имя файла сохраняет узнаваемую часть исходного"""
        return await self._save(
            upload,
            MASTERS_SUBDIR,
            lambda original, ext: f"{_timestamp_ms()}-{sanitize_base_name(original)}{ext}",
        )

    def resolve(self, public_path: Optional[str]) -> Optional[Path]:
        """Путь на диске для /uploads/...; None для внешних ссылок и путей вне хранилища"""
        if not public_path or not public_path.startswith(PUBLIC_PREFIX + "/"):
            return None

        relative = public_path[len(PUBLIC_PREFIX) + 1:]
        root = self.root.resolve()
        candidate = (root / relative).resolve()
        if candidate == root or root not in candidate.parents:
            return None
        return candidate

    def remove(self, public_path: Optional[str]) -> bool:
        """
        Удалить файл по публичному пути. Ошибки только логируются,
        чтобы не блокировать удаление записи в БД.
        """
        path = self.resolve(public_path)
        if path is None:
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Не удалось удалить файл {public_path}: {e}")
            return False

        logger.info(f"Удалён файл {public_path}")
        return True


def get_storage(settings: Settings = Depends(get_settings)) -> FileStorage:
    """Dependency: хранилище файлов по текущим настройкам"""
    return FileStorage(settings.UPLOAD_DIR, settings.max_upload_bytes)

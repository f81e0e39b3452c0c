"""
Модель фотографии галереи
"""
from sqlalchemy import Column, Integer, String, TIMESTAMP
from sqlalchemy.sql import func
from ..database import Base


class GalleryItem(Base):
    """Фото в галерее работ"""

    __tablename__ = "gallery"

    id = Column(Integer, primary_key=True, index=True)
    image_url = Column(String(255), nullable=False)
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)

    def __repr__(self):
        return f"<GalleryItem {self.image_url}>"

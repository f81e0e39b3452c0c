"""
API роутер отзывов
"""
import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.review import Review
from ..security import AdminIdentity, get_current_admin
from ..services.store import commit, create_row, delete_row, get_or_404, replace_update
from ..validators import required_text

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/reviews", tags=["reviews"])


class ReviewFields(BaseModel):
    author: str
    date: str  # произвольная строка, например "Январь 2024"
    rating: StrictInt
    text: str
    avatar: Optional[str] = None

    @field_validator("author", "date", "text")
    @classmethod
    def check_required(cls, value, info):
        return required_text(value, info.field_name)

    @field_validator("rating")
    @classmethod
    def check_rating(cls, value):
        # Валидация рейтинга
        if value < 1 or value > 5:
            raise ValueError("Рейтинг должен быть от 1 до 5")
        return value


class ReviewResponse(BaseModel):
    id: int
    author: str
    date: str
    rating: int
    text: str
    avatar: Optional[str]
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


@router.get("", response_model=List[ReviewResponse])
async def get_reviews(db: Session = Depends(get_db)):
    """Отзывы, новые первыми"""
    return db.query(Review).order_by(Review.created_at.desc(), Review.id.desc()).all()


@router.post("", response_model=ReviewResponse)
async def create_review(
    data: ReviewFields,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    review = create_row(db, Review(**data.model_dump()))
    logger.info(f"Добавлен отзыв #{review.id} от {review.author}")
    return review


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: int,
    data: ReviewFields,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """Полная замена отзыва"""
    review = get_or_404(db, Review, review_id, "Отзыв не найден")
    replace_update(review, data)
    commit(db)
    db.refresh(review)
    return review


@router.delete("/{review_id}")
async def delete_review(
    review_id: int,
    db: Session = Depends(get_db),
    admin: AdminIdentity = Depends(get_current_admin)
):
    review = get_or_404(db, Review, review_id, "Отзыв не найден")
    delete_row(db, review)
    return {"message": "Отзыв удалён"}

"""
Модель отзыва клиента
"""
from sqlalchemy import CheckConstraint, Column, Integer, String, Text, TIMESTAMP
from sqlalchemy.sql import func
from ..database import Base


class Review(Base):
    """Отзыв клиента"""

    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),
    )

    id = Column(Integer, primary_key=True, index=True)
    author = Column(String(100), nullable=False)
    date = Column(String(50), nullable=False)  # строка как есть, не проверяется
    rating = Column(Integer, nullable=False)  # 1-5 stars
    text = Column(Text, nullable=False)
    avatar = Column(String(10), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Review {self.author} - {self.rating} stars>"

"""
Общие операции с БД для CRUD-роутеров

Два явных режима обновления:
    replace_update - полная замена (услуги, отзывы): все поля схемы
        записываются, отсутствующие необязательные поля обнуляются
    merge_update - частичное обновление (мастера, записи): поля, которые
        не переданы или переданы как null, сохраняют текущее значение
"""
import logging
from typing import Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import Base
from ..errors import NotFound, StoreError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def get_or_404(db: Session, model: Type[ModelT], row_id: int, message: str) -> ModelT:
    row = db.query(model).filter(model.id == row_id).first()
    if not row:
        raise NotFound(message)
    return row


def commit(db: Session) -> None:
    """Зафиксировать транзакцию; при сбое откатить и поднять StoreError"""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Ошибка сохранения в БД: {e}", exc_info=True)
        raise StoreError() from e


def create_row(db: Session, row: ModelT) -> ModelT:
    db.add(row)
    commit(db)
    db.refresh(row)
    return row


def delete_row(db: Session, row: Base) -> None:
    db.delete(row)
    commit(db)


def replace_update(row: Base, fields: BaseModel) -> None:
    for name, value in fields.model_dump(mode="json").items():
        setattr(row, name, value)


def merge_update(row: Base, fields: BaseModel) -> None:
    for name, value in fields.model_dump(mode="json", exclude_none=True).items():
        setattr(row, name, value)

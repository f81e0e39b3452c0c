"""
Настройки сайта в таблице settings (ключ -> значение)
"""
import logging
from typing import Dict, Iterable, Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from ..models.setting import Setting
from .store import commit

logger = logging.getLogger(__name__)

# Ключи, которые создаются при первом запуске, если их ещё нет
DEFAULT_SETTINGS = {
    "address": "Ташкент, Узбекистан",
    "phone": "+998 (XX) XXX-XX-XX",
    "hours": "Пн - Вс: 10:00 - 20:00",
    "instagram": "",
    "telegram": "",
    "telegram_token": "",
    "telegram_chat_id": "",
}


def get_all(db: Session) -> Dict[str, Optional[str]]:
    """Все сохранённые настройки. Значения по умолчанию клиенты подставляют сами"""
    return {row.key: row.value for row in db.query(Setting).order_by(Setting.id).all()}


def get_values(db: Session, keys: Iterable[str]) -> Dict[str, Optional[str]]:
    rows = db.query(Setting).filter(Setting.key.in_(list(keys))).all()
    return {row.key: row.value for row in rows}


def upsert(db: Session, key: str, value: Optional[str]) -> None:
    row = db.query(Setting).filter(Setting.key == key).first()
    if row:
        row.value = value
        # onupdate не срабатывает, если значение не изменилось
        row.updated_at = func.now()
    else:
        db.add(Setting(key=key, value=value))
    commit(db)


def upsert_many(db: Session, values: Dict[str, Optional[str]]) -> None:
    """
    Вставить или обновить каждый ключ.
    Фиксируется по одному ключу: при сбое уже записанные ключи не откатываются.
    """
    for key, value in values.items():
        upsert(db, key, value)
    logger.info(f"Обновлены настройки: {', '.join(values)}")


def init_default_settings(db: Session) -> int:
    """Добавить отсутствующие ключи по умолчанию, существующие не трогать"""
    existing = set(get_values(db, DEFAULT_SETTINGS))
    missing = {key: value for key, value in DEFAULT_SETTINGS.items() if key not in existing}
    for key, value in missing.items():
        db.add(Setting(key=key, value=value))
    if missing:
        commit(db)
    return len(missing)

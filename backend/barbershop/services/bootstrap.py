"""
Первичная инициализация: администратор и настройки по умолчанию
"""
import logging
import secrets

from sqlalchemy.orm import Session

from ..config import Settings
from ..models.admin_user import AdminUser
from ..security import hash_password
from .settings_store import init_default_settings
from .store import commit

logger = logging.getLogger(__name__)


def init_default_admin(db: Session, settings: Settings) -> bool:
    """
    Создать единственного администратора, если таблица пуста.

    Пароль берётся из ADMIN_PASSWORD; если он не задан, генерируется
    случайный и выводится в лог один раз.
    """
    if db.query(AdminUser).count() > 0:
        return False

    password = settings.ADMIN_PASSWORD
    generated = not password
    if generated:
        password = secrets.token_urlsafe(12)

    db.add(AdminUser(
        username=settings.ADMIN_USERNAME,
        password=hash_password(password, settings.BCRYPT_ROUNDS)
    ))
    commit(db)

    if generated:
        logger.warning(
            f"Создан администратор {settings.ADMIN_USERNAME} со сгенерированным паролем: {password} "
            f"(задайте ADMIN_PASSWORD или смените пароль в админке)"
        )
    else:
        logger.info(f"Создан администратор {settings.ADMIN_USERNAME}")
    return True


def bootstrap(db: Session, settings: Settings) -> None:
    init_default_admin(db, settings)
    added = init_default_settings(db)
    if added:
        logger.info(f"Добавлено настроек по умолчанию: {added}")

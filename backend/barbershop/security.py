"""
Авторизация администратора: bcrypt-хеши паролей и JWT-токены
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .config import Settings, get_settings
from .database import get_db
from .errors import InvalidCredentials, TokenInvalid, TokenMissing
from .models.admin_user import AdminUser

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class AdminIdentity:
    """Данные администратора из проверенного токена"""
    id: int
    username: str


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # битый хеш или пароль длиннее 72 байт
        return False


def create_access_token(user: AdminUser, settings: Settings) -> str:
    """Подписанный токен на ACCESS_TOKEN_EXPIRE_MINUTES с id и логином"""
    now = datetime.now(timezone.utc)
    payload = {
        "id": user.id,
        "username": user.username,
        "iat": now,
        "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: Optional[str], settings: Settings) -> AdminIdentity:
    """
    Проверить подпись и срок действия токена

    Raises:
        TokenMissing: токен не передан
        TokenInvalid: неверная подпись, формат или истёк срок
    """
    if not token:
        raise TokenMissing()

    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.InvalidTokenError as e:
        logger.info(f"Отклонён токен: {e}")
        raise TokenInvalid()

    user_id = payload.get("id")
    username = payload.get("username")
    if not isinstance(user_id, int) or not username:
        raise TokenInvalid()

    return AdminIdentity(id=user_id, username=username)


def authenticate(db: Session, username: str, password: str) -> AdminUser:
    """Найти администратора по логину и сверить пароль"""
    user = db.query(AdminUser).filter(AdminUser.username == username).first()
    if not user or not verify_password(password, user.password):
        raise InvalidCredentials()
    return user


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db)
) -> AdminIdentity:
    """
    Dependency для эндпоинтов, изменяющих данные

    Токен удалённого администратора отклоняется, даже если ещё не истёк.
    """
    token = credentials.credentials if credentials else None
    identity = decode_access_token(token, settings)

    if db.query(AdminUser.id).filter(AdminUser.id == identity.id).first() is None:
        logger.info(f"Отклонён токен удалённого администратора #{identity.id}")
        raise TokenInvalid()
    return identity

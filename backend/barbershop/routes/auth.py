"""
API роутер авторизации администратора
"""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..database import get_db
from ..errors import InvalidCredentials, NotFound, ValidationError
from ..models.admin_user import AdminUser
from ..security import (
    AdminIdentity,
    authenticate,
    create_access_token,
    get_current_admin,
    hash_password,
    verify_password,
)
from ..services.store import commit

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72  # ограничение bcrypt


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    username: str


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str

    @field_validator("new_password")
    @classmethod
    def check_length(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Пароль должен быть не короче {MIN_PASSWORD_LENGTH} символов")
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Пароль должен быть не длиннее {MAX_PASSWORD_BYTES} байт")
        return value


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Вход в админку: выдаёт токен на 24 часа"""
    user = authenticate(db, data.username, data.password)
    logger.info(f"Вход администратора {user.username}")
    return LoginResponse(token=create_access_token(user, settings), username=user.username)


@router.get("/verify")
async def verify(admin: AdminIdentity = Depends(get_current_admin)):
    """Проверка токена. Клиент при 401/403 сбрасывает токен и просит войти заново"""
    return {"valid": True, "user": {"id": admin.id, "username": admin.username}}


@router.post("/change-password")
async def change_password(
    data: ChangePasswordRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    admin: AdminIdentity = Depends(get_current_admin)
):
    """Смена пароля текущего администратора"""
    user = db.query(AdminUser).filter(AdminUser.id == admin.id).first()
    if not user:
        raise NotFound("Администратор не найден")
    if not verify_password(data.current_password, user.password):
        raise InvalidCredentials("Неверный текущий пароль")
    if data.current_password == data.new_password:
        raise ValidationError("Новый пароль совпадает с текущим")

    user.password = hash_password(data.new_password, settings.BCRYPT_ROUNDS)
    commit(db)
    logger.info(f"Администратор {user.username} сменил пароль")
    return {"success": True, "message": "Пароль изменён"}

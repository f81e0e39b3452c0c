"""
Ошибки приложения и их преобразование в JSON-ответы

Каждая ошибка отдаётся клиенту как {"error": "<сообщение>"}.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Базовая ошибка API"""

    status_code = 500
    default_message = "Внутренняя ошибка сервера"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Некорректные данные"


class AuthError(AppError):
    status_code = 401
    default_message = "Требуется авторизация"


class InvalidCredentials(AuthError):
    default_message = "Неверный логин или пароль"


class TokenMissing(AuthError):
    default_message = "Требуется токен доступа"


class TokenInvalid(AuthError):
    status_code = 403
    default_message = "Недействительный или просроченный токен"


class NotFound(AppError):
    status_code = 404
    default_message = "Не найдено"


class PayloadTooLarge(AppError):
    status_code = 413
    default_message = "Файл слишком большой"


class UnsupportedMediaType(AppError):
    status_code = 415
    default_message = "Разрешены только изображения (jpeg, jpg, png, gif, webp)"


class StoreError(AppError):
    status_code = 500
    default_message = "Ошибка базы данных"


class UpstreamNotificationFailure(AppError):
    """Сбой отправки в Telegram. Только логируется, клиенту не отдаётся"""

    status_code = 502
    default_message = "Не удалось отправить уведомление"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationError.default_message

    first = errors[0]
    # ValueError из field_validator несёт готовое сообщение
    if first.get("type") == "value_error" and first.get("ctx", {}).get("error"):
        return str(first["ctx"]["error"])

    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if first.get("type") == "missing":
        return f"Не указано обязательное поле: {field}"
    if field:
        return f"{field}: {first.get('msg')}"
    return first.get("msg", ValidationError.default_message)


def register_exception_handlers(app: FastAPI) -> None:
    """Подключить обработчики ошибок к приложению"""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return error_response(400, _describe_validation_error(exc))

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        logger.exception("Ошибка БД при обработке %s %s", request.method, request.url.path)
        return error_response(StoreError.status_code, StoreError.default_message)

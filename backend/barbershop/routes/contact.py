"""
Форма обратной связи: заявка пересылается в Telegram и нигде не сохраняется
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.orm import Session

from ..database import get_db
from ..services import settings_store
from ..services.notifications import TelegramNotifier, format_contact_message, get_notifier
from ..validators import required_text

logger = logging.getLogger(__name__)
router = APIRouter(tags=["contact"])

TELEGRAM_KEYS = ("telegram_token", "telegram_chat_id")


class ContactRequest(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None

    @field_validator("name", "phone")
    @classmethod
    def check_required(cls, value, info):
        return required_text(value, info.field_name)


@router.post("/contact")
async def submit_contact(
    data: ContactRequest,
    db: Session = Depends(get_db),
    notifier: TelegramNotifier = Depends(get_notifier)
):
    """
    Заявка с сайта

    Всегда отвечает 200: доставлено ли уведомление, видно из текста message.
    """
    values = settings_store.get_values(db, TELEGRAM_KEYS)
    bot_token = values.get("telegram_token")
    chat_id = values.get("telegram_chat_id")

    if not bot_token or not chat_id:
        logger.info("Telegram не настроен, заявка принята без уведомления")
        return {"success": True, "message": "Заявка получена (Telegram не настроен)"}

    text = format_contact_message(data.name, data.phone, data.email, data.message)
    if await notifier.deliver(bot_token, chat_id, text):
        return {"success": True, "message": "Сообщение успешно отправлено"}

    return {"success": True, "message": "Заявка получена, но уведомление не доставлено"}

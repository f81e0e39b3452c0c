"""
Отправка заявок с сайта в Telegram

Токен бота и chat_id берутся из настроек сайта (таблица settings).
Отправка никогда не роняет запрос клиента: результат возвращается как bool,
сбои пишутся в лог.
"""
import asyncio
import html
import logging
from datetime import datetime
from typing import Optional

import httpx
from fastapi import Depends

from ..config import Settings, get_settings
from ..errors import UpstreamNotificationFailure

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Клиент Telegram Bot API с ограничением времени на отправку"""

    def __init__(
        self,
        api_url: str = "https://api.telegram.org",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def send_message(self, bot_token: str, chat_id: str, text: str) -> None:
        """
        Отправить сообщение

        Raises:
            UpstreamNotificationFailure: сеть недоступна или Telegram ответил не 200
        """
        url = f"{self.api_url}/bot{bot_token}/sendMessage"
        data = {"chat_id": chat_id, "text": text, "parse_mode": "HTML"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, json=data)
        except httpx.HTTPError as e:
            raise UpstreamNotificationFailure(f"Telegram недоступен: {e}") from e

        if response.status_code != 200:
            raise UpstreamNotificationFailure(
                f"Telegram ответил {response.status_code}: {response.text[:200]}"
            )

    async def deliver(self, bot_token: str, chat_id: str, text: str) -> bool:
        """Отправить в отдельной задаче с таймаутом. True, если доставлено"""
        task = asyncio.create_task(self.send_message(bot_token, chat_id, text))
        try:
            await asyncio.wait_for(task, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Telegram не ответил за {self.timeout} с")
            return False
        except UpstreamNotificationFailure as e:
            logger.warning(f"Уведомление не отправлено: {e.message}")
            return False
        except Exception as e:
            # например httpx.InvalidURL из-за пробела или перевода строки в токене
            failure = UpstreamNotificationFailure(f"{type(e).__name__}: {e}")
            logger.warning(f"Уведомление не отправлено: {failure.message}")
            return False

        logger.info(f"Уведомление отправлено в чат {chat_id}")
        return True


def format_contact_message(
    name: str,
    phone: str,
    email: Optional[str] = None,
    message: Optional[str] = None,
    now: Optional[datetime] = None
) -> str:
    """Текст уведомления о заявке с сайта (HTML)"""
    now = now or datetime.now()
    return (
        f"📩 <b>Новая заявка с сайта</b>\n"
        f"━━━━━━━━━━━━━━━━━━\n\n"
        f"👤 <b>Имя:</b> {html.escape(name)}\n"
        f"📞 <b>Телефон:</b> {html.escape(phone)}\n"
        f"📧 <b>Email:</b> {html.escape(email) if email else 'Не указан'}\n"
        f"💬 <b>Сообщение:</b>\n"
        f"{html.escape(message) if message else 'Без сообщения'}\n\n"
        f"🕐 {now.strftime('%d.%m.%Y %H:%M')}"
    )


def get_notifier(settings: Settings = Depends(get_settings)) -> TelegramNotifier:
    """Dependency: клиент Telegram по текущим настройкам"""
    return TelegramNotifier(settings.TELEGRAM_API_URL, settings.TELEGRAM_TIMEOUT_SECONDS)

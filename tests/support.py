# Shared helpers for API tests: admin credentials used by the fixtures,
# a fake Telegram notifier and small upload payloads.

from __future__ import annotations

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse-battery"

# Smallest valid GIF; content is not inspected, only name and MIME type.
GIF_BYTES = (
    b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00\x00\x00"
    b",\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"
)


class FakeNotifier:
    """Records deliveries instead of calling Telegram."""

    def __init__(self, *, delivered: bool = True) -> None:
        self.delivered = delivered
        self.calls: list[tuple[str, str, str]] = []

    async def deliver(self, bot_token: str, chat_id: str, text: str) -> bool:
        self.calls.append((bot_token, chat_id, text))
        return self.delivered


def stored_files(root) -> list:
    """All regular files under an upload root."""
    return sorted(path for path in root.rglob("*") if path.is_file())

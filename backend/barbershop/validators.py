"""
Проверки полей для pydantic-схем запросов
"""
from typing import Optional


def required_text(value: Optional[str], field: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"Не указано обязательное поле: {field}")
    return value


def positive_int(value: int, message: str) -> int:
    if value is None or value <= 0:
        raise ValueError(message)
    return value


def non_negative_int(value: Optional[int], message: str) -> Optional[int]:
    if value is not None and value < 0:
        raise ValueError(message)
    return value

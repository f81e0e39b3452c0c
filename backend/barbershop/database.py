"""
Движок SQLAlchemy, фабрика сессий и базовый класс моделей

SQLite по умолчанию, PostgreSQL при DATABASE_URL вида postgresql://...
(нужен extra postgres).
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from .config import get_settings

settings = get_settings()

if settings.DATABASE_URL.startswith("sqlite"):
    # запросы FastAPI выполняются в разных потоках
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Сессия на время одного запроса; закрывается после ответа"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Создать недостающие таблицы (существующие не изменяются)"""
    from . import models  # noqa: F401  регистрирует модели в Base.metadata

    Base.metadata.create_all(bind=bind or engine)

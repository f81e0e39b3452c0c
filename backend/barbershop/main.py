"""
Главный файл FastAPI приложения
Republic Barbershop: API сайта и админки
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .admin import setup_admin
from .config import get_settings
from .database import SessionLocal, engine, init_db
from .errors import register_exception_handlers
from .routes import auth, bookings, contact, gallery, masters, reviews, services, uploads
from .routes import settings as settings_routes
from .services.bootstrap import bootstrap
from .storage import PUBLIC_PREFIX, FileStorage

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Создание таблиц, администратора и настроек по умолчанию"""
    init_db()
    db = SessionLocal()
    try:
        bootstrap(db, settings)
    finally:
        db.close()
    logger.info(f"API доступно по {settings.API_PREFIX}, окружение {settings.ENVIRONMENT}")

    yield

    logger.info("Остановка приложения")


# FastAPI приложение
app = FastAPI(
    title="Republic Barbershop API",
    description="API сайта барбершопа и админ-панели",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.DEBUG else [settings.SITE_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Подключение роутеров
for router in (
    auth.router,
    services.router,
    masters.router,
    uploads.router,
    gallery.router,
    reviews.router,
    settings_routes.router,
    contact.router,
    bookings.router,
):
    app.include_router(router, prefix=settings.API_PREFIX)

# Загруженные изображения
storage = FileStorage(settings.UPLOAD_DIR, settings.max_upload_bytes)
storage.ensure_dirs()
app.mount(PUBLIC_PREFIX, StaticFiles(directory=str(settings.UPLOAD_DIR)), name="uploads")

# Админ-панель (только для разработчика)
setup_admin(app, engine)


@app.get("/health")
async def health_check():
    return {"status": "ok", "environment": settings.ENVIRONMENT}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("barbershop.main:app", host="127.0.0.1", port=8000, reload=settings.DEBUG)

"""
Админ-панель для разработчика
Доступ: http://localhost:8000/admin
Логин и пароль: учётная запись из таблицы admin_users (та же, что для API)
"""
from sqladmin import Admin, ModelView
from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from .config import get_settings
from .database import SessionLocal
from .errors import InvalidCredentials
from .models.booking import Booking
from .models.gallery_item import GalleryItem
from .models.master import Master
from .models.review import Review
from .models.service import Service
from .models.setting import Setting
from .security import authenticate as check_credentials

settings = get_settings()


class AdminAuth(AuthenticationBackend):
    """Вход по логину и паролю администратора (bcrypt)"""

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = form.get("username") or ""
        password = form.get("password") or ""

        db = SessionLocal()
        try:
            user = check_credentials(db, username, password)
        except InvalidCredentials:
            return False
        finally:
            db.close()

        request.session.update({"admin_id": user.id, "admin_username": user.username})
        return True

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return "admin_id" in request.session


# ==================== МОДЕЛИ ДЛЯ АДМИНКИ ====================

class ServiceAdmin(ModelView, model=Service):
    """Услуги"""
    name = "Услуга"
    name_plural = "Услуги"
    icon = "fa-solid fa-scissors"

    column_list = [Service.id, Service.name, Service.price, Service.duration, Service.icon]
    column_searchable_list = [Service.name]
    column_sortable_list = [Service.id, Service.name, Service.price]

    column_labels = {
        "id": "ID",
        "name": "Название",
        "description": "Описание",
        "price": "Цена",
        "duration": "Длительность (мин)",
        "icon": "Иконка",
        "created_at": "Создано"
    }


class MasterAdmin(ModelView, model=Master):
    """Мастера. Удаление только через API, чтобы вместе с записью удалялось фото"""
    name = "Мастер"
    name_plural = "Мастера"
    icon = "fa-solid fa-user-tie"
    can_delete = False

    column_list = [Master.id, Master.name, Master.specialty, Master.experience, Master.photo_url]
    column_searchable_list = [Master.name, Master.specialty]
    column_sortable_list = [Master.id, Master.name, Master.experience]

    column_labels = {
        "id": "ID",
        "name": "Имя",
        "specialty": "Специализация",
        "experience": "Опыт (лет)",
        "description": "Описание",
        "icon": "Иконка",
        "photo_url": "Фото",
        "created_at": "Создано"
    }


class GalleryAdmin(ModelView, model=GalleryItem):
    """Галерея: только просмотр, загрузка и удаление через API"""
    name = "Фото"
    name_plural = "Галерея"
    icon = "fa-solid fa-images"
    can_create = False
    can_edit = False
    can_delete = False

    column_list = [GalleryItem.id, GalleryItem.image_url, GalleryItem.created_at]
    column_default_sort = [(GalleryItem.created_at, True)]


class ReviewAdmin(ModelView, model=Review):
    """Отзывы"""
    name = "Отзыв"
    name_plural = "Отзывы"
    icon = "fa-solid fa-star"

    column_list = [Review.id, Review.author, Review.date, Review.rating, Review.created_at]
    column_searchable_list = [Review.author, Review.text]
    column_sortable_list = [Review.rating, Review.created_at]
    column_default_sort = [(Review.created_at, True)]

    column_labels = {
        "id": "ID",
        "author": "Автор",
        "date": "Дата",
        "rating": "Оценка",
        "text": "Текст",
        "avatar": "Аватар",
        "created_at": "Создано"
    }


class SettingAdmin(ModelView, model=Setting):
    """Настройки сайта"""
    name = "Настройка"
    name_plural = "Настройки"
    icon = "fa-solid fa-gear"

    column_list = [Setting.key, Setting.value, Setting.updated_at]
    column_searchable_list = [Setting.key]


class BookingAdmin(ModelView, model=Booking):
    """Записи клиентов"""
    name = "Запись"
    name_plural = "Записи"
    icon = "fa-solid fa-calendar-check"

    column_list = [
        Booking.id,
        Booking.client_name,
        Booking.client_phone,
        Booking.service,
        Booking.master,
        Booking.booking_date,
        Booking.booking_time,
        Booking.status
    ]
    column_searchable_list = [Booking.client_name, Booking.client_phone]
    column_sortable_list = [Booking.booking_date, Booking.status, Booking.created_at]
    column_default_sort = [(Booking.booking_date, True)]

    column_labels = {
        "id": "ID",
        "client_name": "Клиент",
        "client_phone": "Телефон",
        "client_email": "Email",
        "service": "Услуга",
        "master": "Мастер",
        "booking_date": "Дата",
        "booking_time": "Время",
        "status": "Статус",
        "notes": "Заметки",
        "created_at": "Создано"
    }


def setup_admin(app, engine):
    """Настройка админ-панели"""
    authentication_backend = AdminAuth(secret_key=settings.SECRET_KEY)

    admin = Admin(
        app,
        engine,
        authentication_backend=authentication_backend,
        title="Republic Barbershop Admin",
        base_url="/admin"
    )

    # Регистрация моделей
    admin.add_view(ServiceAdmin)
    admin.add_view(MasterAdmin)
    admin.add_view(GalleryAdmin)
    admin.add_view(ReviewAdmin)
    admin.add_view(SettingAdmin)
    admin.add_view(BookingAdmin)

    return admin

"""
Скрипт инициализации базы данных
Создаёт таблицы, администратора и настройки по умолчанию
Запуск из каталога backend: python init_db.py
"""
import sys
sys.path.insert(0, '.')

from barbershop.config import get_settings
from barbershop.database import SessionLocal, init_db
from barbershop.services.bootstrap import init_default_admin
from barbershop.services.settings_store import init_default_settings


def main():
    settings = get_settings()

    print("Создание таблиц...")
    init_db()
    print("Таблицы созданы!")

    db = SessionLocal()
    try:
        if init_default_admin(db, settings):
            print(f"Создан администратор {settings.ADMIN_USERNAME}")
        else:
            print("Администратор уже существует, пропускаем...")

        added = init_default_settings(db)
        print(f"Добавлено настроек по умолчанию: {added}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
    print("\nИнициализация завершена!")
    print("Теперь можно запустить сервер: python -m uvicorn barbershop.main:app --reload")

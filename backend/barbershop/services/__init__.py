"""
Сервисный слой: хранилище, настройки, уведомления
"""

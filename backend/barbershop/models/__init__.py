"""
SQLAlchemy модели для базы данных
"""
from .service import Service
from .master import Master
from .gallery_item import GalleryItem
from .review import Review
from .setting import Setting
from .booking import Booking, BookingStatus
from .admin_user import AdminUser

__all__ = [
    "Service",
    "Master",
    "GalleryItem",
    "Review",
    "Setting",
    "Booking",
    "BookingStatus",
    "AdminUser"
]

from gallery.core.db.base import Base, BaseModel, TimestampMixin, generate_uuid

__all__ = [
    "Base",
    "BaseModel",
    "TimestampMixin",
    "generate_uuid",
]

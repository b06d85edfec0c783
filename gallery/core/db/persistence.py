"""
Persistence helpers shared by the services.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel as Dto
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.core.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


async def save_entity(
    db: AsyncSession,
    model: Type[ModelT],
    dto: Dto,
    key: str = "id",
    **overrides: Any,
) -> ModelT:
    """
    Create-or-update by primary key.

    When the DTO's key names an existing row, only the fields set on the DTO
    (plus `overrides`) are written. Otherwise a new row is built from every
    DTO field, keeping the given key if any. Nothing is flushed here.

    Args:
        db: Async session
        model: Mapped class
        dto: Pydantic DTO whose field names match the model's columns
        key: Primary key attribute name
        overrides: Values forced on top of the DTO (e.g. a parent id)

    Returns:
        The pending or persistent entity
    """
    key_value = getattr(dto, key, None)
    entity = await db.get(model, key_value) if key_value is not None else None

    if entity is None:
        values = {**dto.model_dump(), **overrides}
        if values.get(key) is None:
            values.pop(key, None)
        entity = model(**values)
        db.add(entity)
    else:
        values = {**dto.model_dump(exclude_unset=True), **overrides}
        values.pop(key, None)
        for field, value in values.items():
            setattr(entity, field, value)

    return entity

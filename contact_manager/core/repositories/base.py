from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_manager.infrastructure.database.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class SqlAlchemyRepository(Generic[ModelType]):

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_item(self, item_id: Any) -> ModelType | None:
        return await self.session.get(self.model, item_id)

    async def get_by_filter(self, one_or_none: bool = False, **filters) -> ModelType | list[ModelType] | None:
        query = select(self.model).filter_by(**filters)
        result = await self.session.execute(query)
        if one_or_none:
            return result.scalars().one_or_none()
        return list(result.scalars().all())

    async def add_item(self, item: ModelType) -> ModelType:
        self.session.add(item)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(item)
        return item

    async def update_item(self, item: ModelType, **values) -> ModelType:
        for key, value in values.items():
            setattr(item, key, value)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(item)
        return item

    async def delete_item(self, item: ModelType) -> None:
        try:
            await self.session.delete(item)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

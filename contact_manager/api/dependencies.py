from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

import contact_manager.core.repositories as repositories
import contact_manager.core.services as services


async def get_db_session(
    request: Request,
) -> AsyncGenerator[AsyncSession, None]:
    session = await request.app.state.db_connection.get_session()
    try:
        yield session
    finally:
        await session.close()


async def get_contact_service(session=Depends(get_db_session)) -> services.ContactService:
    return services.ContactService(
        repository=repositories.ContactRepository(session=session)
    )

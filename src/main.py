"""
Production FastAPI Application

Run with: uvicorn src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.airline_ticketing.app.command.purge_expired_pending_changes_use_case import (
    PurgeExpiredPendingChangesUseCase,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Airline Service] Starting up...')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Airline Service] Dependency injection wired')

    database = container.database()
    await create_db_and_tables(database.engine)
    Logger.base.info('🗄️  [Airline Service] Database tables ready')

    # Payment intents abandoned while the service was down
    async with database.session() as session:
        purged = await PurgeExpiredPendingChangesUseCase(
            uow=SqlAlchemyUnitOfWork(session)
        ).execute()
    Logger.base.info(f'🧹 [Airline Service] Purged {purged} expired pending changes')

    Logger.base.info('✅ [Airline Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Airline Service] Shutting down...')
    await cleanup()
    container.unwire()
    Logger.base.info('👋 [Airline Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (create_async_engine, async_sessionmaker,
                                    AsyncSession, AsyncEngine)
from sqlalchemy.orm import declarative_base
from app.core.config import Settings
from logging import getLogger

logger = getLogger(__name__)

Base = declarative_base()

def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    engine = create_async_engine(
        settings.async_database_url,
        echo=settings.sql_echo,
        future=True
    )
    return engine

def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False
    )

async def ping_database(engine: AsyncEngine):
    async with engine.connect() as conn:
        await conn.execute(text('SELECT 1'))
    logger.info('Successfully connected with the database')

async def get_sessionmaker(request: Request) -> async_sessionmaker[AsyncSession]:
    # built once in the app lifespan, handed to every request
    return request.app.state.sessionmaker

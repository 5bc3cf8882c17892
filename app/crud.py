from sqlalchemy import select, insert
from sqlalchemy.ext.asyncio import AsyncSession, AsyncSessionTransaction
from app.models import Book
from typing import List
from logging import getLogger

logger = getLogger(__name__)

async def get_all_books(db: AsyncSession) -> List[Book]:
    # no ORDER BY, rows come back in whatever order the database picks
    stmt = select(Book)
    result = await db.execute(stmt)
    return list(result.scalars().all())

async def get_book_by_id(db: AsyncSession, book_id: int) -> Book:
    stmt = select(Book).where(Book.id == book_id)
    result = await db.execute(stmt)
    # raises NoResultFound when the id is unknown
    return result.scalar_one()

async def insert_book(db: AsyncSession, book_data: dict) -> Book:
    row = {
        'code': book_data['code'],
        'name': book_data.get('name', ''),
        'author': book_data.get('author', ''),
        'is_archived': book_data.get('is_archived', False),
    }
    stmt = insert(Book).returning(Book)
    result = await db.scalars(stmt, [row])
    return result.one()

async def begin_tx(db: AsyncSession) -> AsyncSessionTransaction:
    tx = await db.begin()
    logger.info('Begin transaction')
    return tx

async def commit_tx(tx: AsyncSessionTransaction):
    await tx.commit()
    logger.info('Commit transaction')

async def rollback_tx(tx: AsyncSessionTransaction):
    if not tx.is_active:
        return
    try:
        await tx.rollback()
    except Exception as e:
        logger.error(f'Rollback failed: {e}')
        raise
    logger.info('Rollback transaction')

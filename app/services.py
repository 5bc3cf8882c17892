from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from app import crud
from app.models import Book
from app.utils import generate_book_code
from typing import List
from logging import getLogger

logger = getLogger(__name__)

async def list_books_service(
        session_factory: async_sessionmaker[AsyncSession]) -> List[Book]:
    try:
        async with session_factory() as db:
            books = await crud.get_all_books(db)
        logger.info(f'Retrieved {len(books)} books')
        return books
    except SQLAlchemyError as e:
        logger.error(f'DataBase error listing books: {e}')
        raise

async def get_book_service(
        session_factory: async_sessionmaker[AsyncSession],
        book_id: int) -> Book:
    try:
        async with session_factory() as db:
            book = await crud.get_book_by_id(db, book_id)
        logger.info(f'Retrieved book: {book.code}')
        return book
    except SQLAlchemyError as e:
        logger.error(f'DataBase error retrieving book {book_id}: {e}')
        raise

async def create_book_service(
        session_factory: async_sessionmaker[AsyncSession],
        book_data: dict) -> Book:
    """
    Assign the next sequential code and insert the book in its own transaction.

    The count is read before the transaction begins, so two concurrent calls
    can compute the same code. Nothing in the schema rejects the duplicate.
    """
    books = await list_books_service(session_factory)
    book_data = {**book_data, 'code': generate_book_code(len(books))}

    async with session_factory() as db:
        tx = await crud.begin_tx(db)
        try:
            book = await crud.insert_book(db, book_data)
            await crud.commit_tx(tx)
        except SQLAlchemyError as e:
            logger.error(f'DataBase error creating new book: {e}')
            await crud.rollback_tx(tx)
            raise
    logger.info(f'New book created: {book.code}')
    return book

from fastapi import APIRouter, Depends, Body
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from app.schemas import BookCreate, BookResponse
from app import services
from app.core.database import get_sessionmaker
from app.utils import string_to_int
from typing import Annotated

books_router = APIRouter(prefix='/books')

# failures are written back as the error text, still with a 200
def render_error(e: Exception) -> str:
    return str(e)

def render_book(book) -> dict:
    return BookResponse.model_validate(book).model_dump(mode='json', by_alias=True)

@books_router.get('')
async def get_all_books(
    session_factory: async_sessionmaker[AsyncSession]=Depends(get_sessionmaker)
    ):
    try:
        books = await services.list_books_service(session_factory)
    except SQLAlchemyError as e:
        return render_error(e)
    return [render_book(book) for book in books]

@books_router.get('/{id}')
async def get_book(
    id: str,
    session_factory: async_sessionmaker[AsyncSession]=Depends(get_sessionmaker)
    ):
    try:
        book_id = string_to_int(id)
        book = await services.get_book_service(session_factory, book_id)
    except (ValueError, SQLAlchemyError) as e:
        return render_error(e)
    return render_book(book)

@books_router.post('')
async def create_book(
    book_create: Annotated[BookCreate, Body()],
    session_factory: async_sessionmaker[AsyncSession]=Depends(get_sessionmaker)
    ):
    book_data = book_create.model_dump()
    try:
        book = await services.create_book_service(session_factory, book_data)
    except SQLAlchemyError as e:
        return render_error(e)
    return render_book(book)

@books_router.put('/{id}', response_class=PlainTextResponse)
async def update_book(id: str):
    return 'book update'

@books_router.delete('/{id}', response_class=PlainTextResponse)
async def delete_book(id: str):
    return 'book delete'

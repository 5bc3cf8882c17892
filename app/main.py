from fastapi import FastAPI, APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager
from app.core.config import Settings
from app.core.database import create_engine_from_settings, create_sessionmaker, ping_database
from app.core.middleware import RequestLoggerMiddleware
from app.routers import books, ping
from logging import getLogger

logger = getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    engine = create_engine_from_settings(settings)
    try:
        # an unreachable database aborts startup
        await ping_database(engine)
        app.state.sessionmaker = create_sessionmaker(engine)
        yield # app runs here
    finally:
        await engine.dispose()

app = FastAPI(lifespan=lifespan)
app.add_middleware(RequestLoggerMiddleware)

@app.exception_handler(RequestValidationError)
async def invalid_json_handler(request: Request, exc: RequestValidationError):
    logger.warning(f'Invalid request body: {exc.errors()}')
    return JSONResponse('invalid json request')

api_router = APIRouter(prefix='/api')
api_router.include_router(ping.ping_router)
api_router.include_router(books.books_router)
app.include_router(api_router)

@app.get('/', response_class=PlainTextResponse)
async def root():
    return 'welcome'

@app.get('/health', response_class=PlainTextResponse)
async def health():
    return 'check'

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.config import Settings
from app.exceptions.custom import (
    MutationFailedError,
    ResourceNotFoundError,
    StoreError,
    ValidationFailed,
)
from app.exceptions.handlers import (
    mutation_failed_handler,
    not_found_handler,
    request_validation_error_handler,
    store_error_handler,
    validation_failed_handler,
)
from app.routers.hotels import router as hotels_router
from app.routers.rooms import router as rooms_router
from app.services.database import Database
from app.services.hotel import HotelService
from app.services.room import RoomService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    async with Database.connect(settings.database_url, echo=settings.sql_echo) as db:
        await db.create_schema()

        app.state.hotel_service = HotelService(db)
        app.state.room_service = RoomService(db)

        yield


app = FastAPI(title="Hotel API", lifespan=lifespan)

app.add_exception_handler(ValidationFailed, validation_failed_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(ResourceNotFoundError, not_found_handler)
app.add_exception_handler(MutationFailedError, mutation_failed_handler)
app.add_exception_handler(StoreError, store_error_handler)

app.include_router(hotels_router)
app.include_router(rooms_router)


@app.get("/health")
async def health():
    return {"status": "ok"}

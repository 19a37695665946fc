import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.responses import FieldError

from .custom import MutationFailedError, ResourceNotFoundError, StoreError, ValidationFailed

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Validation Error"


def _validation_response(errors: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "message": VALIDATION_MESSAGE,
            "errors": [e.model_dump() for e in errors],
        },
    )


async def validation_failed_handler(_request: Request, exc: ValidationFailed) -> JSONResponse:
    logger.info("Rejected payload: %s", exc)
    return _validation_response(exc.errors)


async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed bodies: drop the leading "body" segment FastAPI puts in loc
    errors = [
        FieldError(
            path=list(err.get("loc", ())[1:]),
            message=err.get("msg", "Invalid value"),
        )
        for err in exc.errors()
    ]
    logger.info("Rejected request body: %d error(s)", len(errors))
    return _validation_response(errors)


async def not_found_handler(_request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    logger.info("%s %s not found", exc.resource, exc.resource_id)
    return JSONResponse(status_code=404, content={"message": exc.message})


async def mutation_failed_handler(_request: Request, exc: MutationFailedError) -> JSONResponse:
    logger.error("Mutation failed: %s", exc.message)
    return JSONResponse(status_code=500, content={"message": exc.message})


async def store_error_handler(_request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store error: %s", exc.message)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error"},
    )

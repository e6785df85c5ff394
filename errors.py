# errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.routing import APIRoute
import logging

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    """Missing or malformed required fields."""
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class StoreError(ApiError):
    """A database or file operation failed. Write paths answer 400."""
    status_code = 500


def describe_validation_error(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        # first element is the location kind: body, query, path...
        field = ".".join(str(part) for part in error["loc"][1:]) or "body"
        problems.append(f"{field}: {error['msg']}")
    return "Validation error: " + "; ".join(problems)


class JSONErrorRoute(APIRoute):
    """Route whose rejected request bodies answer JSON {"error": ...} instead of plain text."""

    def get_route_handler(self):
        route_handler = super().get_route_handler()

        async def json_error_handler(request: Request):
            try:
                return await route_handler(request)
            except RequestValidationError as exc:
                message = describe_validation_error(exc)
                logger.warning(f"{request.method} {request.url.path} rejected: {message}")
                return JSONResponse(status_code=400, content={"error": message})

        return json_error_handler


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.error(f"{request.method} {request.url.path} failed ({exc.status_code}): {exc.message}")
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = describe_validation_error(exc)
        logger.warning(f"{request.method} {request.url.path} rejected: {message}")
        return PlainTextResponse(message, status_code=400)

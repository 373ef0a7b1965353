"""
Error responder: the one place a failure becomes a status code and a JSON body.
Clients only ever see {"error": <message>}; unexpected errors are logged here
and reported with a generic message.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from loguru import logger

from .exceptions import HttpError, API_ERRORS


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_error_handler(request: Request, exc: HttpError) -> JSONResponse:
    # Server errors were already logged where the service caught them
    if exc.code < 500:
        logger.warning(f"{request.method} {request.url.path} -> {exc.code}: {exc.message}")
    return error_response(exc.code, exc.message)


async def starlette_http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return error_response(404, API_ERRORS["NOT_FOUND"])
    return error_response(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> malformed body: {exc.errors()}")
    return error_response(400, "Invalid request body")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, API_ERRORS["SERVER_ERROR"])


def register_error_handlers(app: FastAPI) -> None:
    """Attach the error responder to the application"""
    app.add_exception_handler(HttpError, http_error_handler)
    app.add_exception_handler(StarletteHTTPException, starlette_http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.core import errors

logger = logging.getLogger(__name__)

# Most specific first; the first matching class wins.
ERROR_STATUS = [
    (errors.NotFound, status.HTTP_404_NOT_FOUND, 'NOT_FOUND'),
    (errors.OutOfStock, status.HTTP_400_BAD_REQUEST, 'OUT_OF_STOCK'),
    (errors.InvalidCredentials, status.HTTP_401_UNAUTHORIZED, 'UNAUTHORIZED'),
    (errors.InvalidToken, status.HTTP_401_UNAUTHORIZED, 'UNAUTHORIZED'),
    (errors.ExpiredToken, status.HTTP_401_UNAUTHORIZED, 'UNAUTHORIZED'),
    (errors.DuplicateKey, status.HTTP_409_CONFLICT, 'CONFLICT'),
    (errors.SweetShopError, status.HTTP_400_BAD_REQUEST, 'BAD_REQUEST'),
]

HTTP_STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: 'BAD_REQUEST',
    status.HTTP_401_UNAUTHORIZED: 'UNAUTHORIZED',
    status.HTTP_403_FORBIDDEN: 'FORBIDDEN',
    status.HTTP_404_NOT_FOUND: 'NOT_FOUND',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'METHOD_NOT_ALLOWED',
}


def error_body(message: str, code: str, details=None) -> dict:
    body = {'message': message, 'code': code}
    if details is not None:
        body['details'] = details
    return {'error': body}


def status_for(exc: errors.SweetShopError) -> tuple[int, str]:
    for error_class, status_code, code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code, code
    return status.HTTP_400_BAD_REQUEST, 'BAD_REQUEST'


async def handle_sweet_shop_error(_request: Request, exc: errors.SweetShopError) -> JSONResponse:
    status_code, code = status_for(exc)
    return JSONResponse(status_code=status_code, content=error_body(exc.message, code))


async def handle_http_exception(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = HTTP_STATUS_CODES.get(exc.status_code, 'ERROR')
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), code),
        headers=getattr(exc, 'headers', None),
    )


async def handle_validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body('Validation failed', 'VALIDATION_ERROR', jsonable_encoder(exc.errors())),
    )


async def handle_database_error(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception('Unexpected database failure', exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body('Internal server error', 'INTERNAL_ERROR'),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(errors.SweetShopError, handle_sweet_shop_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)

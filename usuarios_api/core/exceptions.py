# usuarios_api/core/exceptions.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class UsuarioError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Erro interno."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(UsuarioError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Nome, email e senha são obrigatórios."


class DuplicateEmailError(UsuarioError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email já cadastrado."


class NotFoundError(UsuarioError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Usuário não encontrado."


class StorageError(UsuarioError):
    default_message = "Erro ao acessar o banco de dados."


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or ValidationError.default_message


async def usuario_error_handler(request: Request, exc: UsuarioError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=exc.__cause__ or exc,
        )
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.warning(f"{request.method} {request.url.path} invalid request: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message},
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} storage error: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": StorageError.default_message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UsuarioError, usuario_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)

"""Interface layer errors and HTTP error mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from datespot.domain.error import (
    AuthRequiredError,
    DomainError,
    GateError,
    NotFoundError,
    RemoteStoreError,
    UploadError,
    ValidationError,
)

# Seconds a client should wait before retrying a failed store operation
RETRY_AFTER_SECONDS = 2


def _error(status_code: int, code: str, message: str, **headers: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code},
        headers=headers or None,
    )


async def handle_auth_required(request: Request, exc: AuthRequiredError) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, "auth_required", str(exc))


async def handle_gate_error(request: Request, exc: GateError) -> JSONResponse:
    logfire.info("Spot rejected by gate", code=exc.code, path=request.url.path)
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, exc.code, str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, "not_found", str(exc))


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, "validation_error", str(exc))


async def handle_upload_error(request: Request, exc: UploadError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, "upload_error", str(exc))


async def handle_remote_store(request: Request, exc: RemoteStoreError) -> JSONResponse:
    logfire.error(
        "Store failure surfaced to client",
        operation=exc.operation,
        retryable=exc.retryable,
        path=request.url.path,
    )
    if exc.retryable:
        return _error(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "store_unavailable",
            "The change could not be saved. Please try again.",
            **{"Retry-After": str(RETRY_AFTER_SECONDS)},
        )
    return _error(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "store_rejected",
        "The change was rejected by the store.",
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    logfire.error("Unhandled domain error", error=str(exc), path=request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "domain_error", str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to HTTP responses.

    Handlers are looked up by the exception's MRO, so subclasses resolve to
    the most specific handler registered here.
    """
    app.add_exception_handler(AuthRequiredError, handle_auth_required)  # type: ignore[arg-type]
    app.add_exception_handler(GateError, handle_gate_error)  # type: ignore[arg-type]
    app.add_exception_handler(NotFoundError, handle_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, handle_validation)  # type: ignore[arg-type]
    app.add_exception_handler(UploadError, handle_upload_error)  # type: ignore[arg-type]
    app.add_exception_handler(RemoteStoreError, handle_remote_store)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]

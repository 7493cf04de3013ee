from .base import (
    AppError,
    DomainError,
    ErrorKind,
    InfrastructureError,
    InternalError,
    StoreError,
    ValidationError,
)
from .catalog import ErrorCatalog, ErrorResponse
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "ErrorCatalog",
    "ErrorKind",
    "ErrorResponse",
    "InfrastructureError",
    "InternalError",
    "StoreError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]

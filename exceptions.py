"""
Error types raised by the rent ledger services and their HTTP mapping.

Services raise these; routers let them propagate and the handlers
installed by register_exception_handlers() turn them into JSON responses
of the form {"detail": "<message>"}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RentLedgerError(Exception):
     """Base class for all application errors."""

     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

     def __init__(self, message: str):
          super().__init__(message)
          self.message = message


class ValidationError(RentLedgerError):
     """Malformed period, bad amount, missing required field."""

     status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(RentLedgerError):
     status_code = status.HTTP_404_NOT_FOUND


class ConflictError(RentLedgerError):
     status_code = status.HTTP_409_CONFLICT


class DuplicateEntryError(ConflictError):
     """A ledger insert was rejected by a uniqueness constraint."""


class StoreError(RentLedgerError):
     """Underlying persistence failure. Never retried."""


def _format_validation_error(exc: RequestValidationError) -> str:
     messages = []
     for err in exc.errors():
          loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
          field = ".".join(loc)
          messages.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
     return "; ".join(messages) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:

     @app.exception_handler(StoreError)
     async def store_error_handler(request: Request, exc: StoreError):
          return JSONResponse(
               status_code=exc.status_code,
               content={"detail": "Internal server error"},
          )

     @app.exception_handler(RentLedgerError)
     async def rent_ledger_error_handler(request: Request, exc: RentLedgerError):
          return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

     @app.exception_handler(RequestValidationError)
     async def request_validation_handler(request: Request, exc: RequestValidationError):
          return JSONResponse(
               status_code=status.HTTP_400_BAD_REQUEST,
               content={"detail": _format_validation_error(exc)},
          )

     @app.exception_handler(Exception)
     async def generic_exception_handler(request: Request, exc: Exception):
          logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
          return JSONResponse(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               content={"detail": "Internal server error"},
          )

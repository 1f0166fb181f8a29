# core/errors.py
"""
Failure kinds raised by the catalog and the single table mapping them to HTTP statuses.

Services raise CatalogError directly. Anything else that escapes a request
(database errors, framework errors, bugs) is turned into a CatalogError by
classify() so the API boundary only ever renders one type.
"""

import re
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from fastapi.exceptions import RequestValidationError
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import DBAPIError, IntegrityError, NoResultFound, SQLAlchemyError
from starlette.exceptions import HTTPException

ErrorDetail = Union[str, List[str], Dict[str, List[str]]]


class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    NOT_FOUND_WHILE_DELETING = "not_found_while_deleting"
    CONFLICT = "conflict"
    FOREIGN_KEY = "foreign_key"
    MISSING_FIELD = "missing_field"
    QUERY_FAILED = "query_failed"
    STORAGE = "storage"
    HTTP = "http"
    UNEXPECTED = "unexpected"


STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.VALIDATION: 422,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NOT_FOUND_WHILE_DELETING: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.FOREIGN_KEY: 400,
    ErrorKind.MISSING_FIELD: 400,
    ErrorKind.QUERY_FAILED: 422,
    ErrorKind.STORAGE: 500,
    ErrorKind.HTTP: 500,
    ErrorKind.UNEXPECTED: 500,
}


class CatalogError(Exception):
    """A failure of a known kind, carrying the message shown to the client.

    Args:
        kind: Which failure this is; decides the HTTP status
        message: Human-readable summary
        error: Structured detail (defaults to the message)
        status_code: Overrides the status from STATUS_BY_KIND
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        error: Optional[ErrorDetail] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.error = error if error is not None else message
        self._status_code = status_code

    @property
    def status_code(self) -> int:
        return self._status_code or STATUS_BY_KIND[self.kind]

    @classmethod
    def not_found(cls, entity: str, entity_id: Any) -> "CatalogError":
        return cls(ErrorKind.NOT_FOUND, f"{entity} with ID {entity_id} not found")

    @classmethod
    def not_found_while_deleting(cls, entity: str) -> "CatalogError":
        return cls(ErrorKind.NOT_FOUND_WHILE_DELETING, f"{entity} not found during delete operation")

    @classmethod
    def invalid_request(cls, message: str) -> "CatalogError":
        return cls(ErrorKind.INVALID_REQUEST, message)

    def __repr__(self) -> str:
        return f"CatalogError({self.kind.value}, {self.message!r})"


# PostgreSQL SQLSTATE codes for integrity violations
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"

_PG_KEY = re.compile(r'Key \((.*?)\)=')
_PG_COLUMN = re.compile(r'column "(.*?)"')
_PG_DETAIL = re.compile(r'DETAIL:\s*(.*)')
_SQLITE_COLUMN = re.compile(r'constraint failed: \w+\.(\w+)')

# Message templates per pydantic error type; {field} is the camelCase field name
VALIDATION_MESSAGES: Dict[str, str] = {
    "missing": "{field} is required",
    "string_type": "{field} must be a string",
    "string_too_short": "{field} should not be empty",
    "string_too_long": "{field} must not exceed {max_length} characters",
    "int_type": "{field} must be a number",
    "int_parsing": "{field} must be a number",
    "int_from_float": "{field} must be an integer",
    "greater_than": "{field} must be a positive number",
    "date_type": "{field} must be a valid ISO 8601 date string (YYYY-MM-DD)",
    "date_parsing": "{field} must be a valid ISO 8601 date string (YYYY-MM-DD)",
    "date_from_datetime_parsing": "{field} must be a valid ISO 8601 date string (YYYY-MM-DD)",
    "date_from_datetime_inexact": "{field} must be a valid ISO 8601 date string (YYYY-MM-DD)",
    "model_attributes_type": "request body must be a JSON object",
    "dict_type": "request body must be a JSON object",
    "json_invalid": "request body is not valid JSON",
}


def _sqlstate(orig: Any) -> Optional[str]:
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def _column_name(raw: str) -> str:
    return to_camel(raw) if "_" in raw else raw


def classify_integrity_error(exc: IntegrityError) -> CatalogError:
    """Split a constraint violation into conflict, foreign-key or missing-field"""
    orig = exc.orig
    code = _sqlstate(orig)
    text = str(orig)

    if code == UNIQUE_VIOLATION or "UNIQUE constraint failed" in text:
        match = _PG_KEY.search(text) or _SQLITE_COLUMN.search(text)
        field = _column_name(match.group(1)) if match else getattr(getattr(orig, "diag", None), "constraint_name", None) or "field"
        return CatalogError(ErrorKind.CONFLICT, "Duplicate entry found", f"{field} already exists")

    if code == FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in text:
        match = _PG_DETAIL.search(text)
        detail = match.group(1).strip() if match else "Referenced entity does not exist"
        return CatalogError(ErrorKind.FOREIGN_KEY, "Foreign key constraint violation", detail)

    if code == NOT_NULL_VIOLATION or "NOT NULL constraint failed" in text:
        match = _PG_COLUMN.search(text) or _SQLITE_COLUMN.search(text)
        column = _column_name(match.group(1)) if match else "field"
        return CatalogError(ErrorKind.MISSING_FIELD, "Missing required field", f"{column} is required")

    return CatalogError(ErrorKind.QUERY_FAILED, "Database query failed", text or "Query execution error")


def validation_messages(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    """Flatten pydantic errors into {field: [messages]}"""
    flattened: Dict[str, List[str]] = {}
    for err in errors:
        loc = [part for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = str(loc[-1]) if loc else "body"
        template = VALIDATION_MESSAGES.get(err.get("type", ""))
        if template:
            message = template.format(field=field, **(err.get("ctx") or {}))
        else:
            message = err.get("msg", "Invalid value")
        flattened.setdefault(field, []).append(message)
    return flattened


def classify(exc: Exception) -> CatalogError:
    """Turn any exception into a CatalogError"""
    if isinstance(exc, CatalogError):
        return exc
    if isinstance(exc, RequestValidationError):
        return CatalogError(ErrorKind.VALIDATION, "Validation failed", validation_messages(exc.errors()))
    if isinstance(exc, IntegrityError):
        return classify_integrity_error(exc)
    if isinstance(exc, DBAPIError):
        return CatalogError(ErrorKind.QUERY_FAILED, "Database query failed", str(exc.orig) or "Query execution error")
    if isinstance(exc, NoResultFound):
        return CatalogError(ErrorKind.NOT_FOUND, "Resource not found", str(exc))
    if isinstance(exc, SQLAlchemyError):
        return CatalogError(ErrorKind.STORAGE, "Database operation failed", str(exc))
    if isinstance(exc, HTTPException):
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return CatalogError(ErrorKind.HTTP, detail, detail, status_code=exc.status_code)

    message = str(exc) or "An unexpected error occurred"
    status_code = getattr(exc, "status_code", None)
    return CatalogError(
        ErrorKind.UNEXPECTED,
        message,
        message,
        status_code=status_code if isinstance(status_code, int) else None
    )

"""Translate mysql-connector errors into the API error taxonomy.

This is the only module that looks at driver error codes.
"""

from __future__ import annotations

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import (
    ConflictError,
    DomainError,
    InternalError,
    ReferentialError,
    UnavailableError,
)

_DUPLICATE = {errorcode.ER_DUP_ENTRY}
_MISSING_PARENT = {errorcode.ER_NO_REFERENCED_ROW_2, errorcode.ER_NO_REFERENCED_ROW}
_HAS_CHILDREN = {errorcode.ER_ROW_IS_REFERENCED_2, errorcode.ER_ROW_IS_REFERENCED}
_CONNECTION_LOST = {
    errorcode.CR_CONN_HOST_ERROR,
    errorcode.CR_SERVER_GONE_ERROR,
    errorcode.CR_SERVER_LOST,
    errorcode.CR_SERVER_LOST_EXTENDED,
}


def translate_db_error(exc: Exception, *, label: str) -> DomainError:
    """Map a driver exception to exactly one DomainError.

    `label` names the record kind in client messages, e.g. "profesor".
    """
    if isinstance(exc, DomainError):
        return exc

    detail = getattr(exc, "msg", None) or str(exc)
    errno = getattr(exc, "errno", None)

    if errno in _DUPLICATE:
        return ConflictError(f"Error: el ID de {label} ya existe.", detail=detail)
    if errno in _HAS_CHILDREN:
        return ConflictError(f"Error: el {label} tiene asistencias u horarios asociados.", detail=detail)
    if errno in _MISSING_PARENT:
        return ReferentialError("Error: el ID del profesor no existe.", detail=detail)
    if errno in _CONNECTION_LOST or isinstance(
        exc, (mysql.connector.errors.InterfaceError, mysql.connector.errors.PoolError)
    ):
        return UnavailableError(detail=detail)
    return InternalError(f"Error interno del servidor ({label}).", detail=detail)

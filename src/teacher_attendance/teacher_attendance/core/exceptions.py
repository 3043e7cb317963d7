from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class DomainError(Exception):
    """Base exception for every failure the API reports to clients.

    The subclasses below form a closed set; each one maps to exactly one HTTP
    status code.
    """

    status_code = 500
    default_message = "Error interno del servidor."

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.detail:
            body["error"] = self.detail
        return body


class ValidationError(DomainError):
    """Raised when required fields are missing from a request."""

    status_code = 400
    default_message = "Faltan campos obligatorios."

    def __init__(self, fields: Sequence[str], message: Optional[str] = None):
        self.fields = list(fields)
        if message is None:
            message = f"Campos obligatorios: {', '.join(self.fields)}."
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        body["fields"] = self.fields
        return body


class ReferentialError(DomainError):
    """Raised when a write references a parent row that does not exist."""

    status_code = 400
    default_message = "Error: la entidad referenciada no existe."


class ConflictError(DomainError):
    """Raised on a unique-constraint violation (duplicate id)."""

    status_code = 409
    default_message = "Error: el registro ya existe."


class NotFoundError(DomainError):
    status_code = 404
    default_message = "Registro no encontrado."


class UnavailableError(DomainError):
    """Raised when the database pool is not initialized or unreachable."""

    status_code = 503
    default_message = "Servicio no disponible: la base de datos no está conectada."


class InternalError(DomainError):
    status_code = 500

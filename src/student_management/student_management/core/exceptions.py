from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data or configuration is invalid."""


class NotFoundError(DomainError):
    """Raised when a lookup by identifier matches no record."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} not found: {entity_id!r}")
        self.entity = entity
        self.entity_id = entity_id

"""Base use case and shared response models."""

import math
from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from bazaar.domain.error import NotFoundError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Response model rendered with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationResponse(CamelModel):
    """Page metadata returned next to a list."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationResponse":
        return cls(
            page=page, limit=limit, total=total, total_pages=math.ceil(total / limit)
        )


def clamp_page(page: int | None, limit: int | None, default: int, maximum: int):
    """Normalize page and limit query values.

    Returns:
        Tuple of (page, limit, offset)
    """
    page = max(page or 1, 1)
    limit = min(max(limit or default, 1), maximum)
    return page, limit, (page - 1) * limit


def parse_id(value: str, resource: str) -> UUID:
    """Parse a path identifier.

    A malformed id cannot name an existing resource, so it is reported as
    not found.
    """
    try:
        return UUID(value)
    except ValueError:
        raise NotFoundError(resource, value)

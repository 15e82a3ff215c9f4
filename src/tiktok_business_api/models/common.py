"""Shared Pydantic models for the TikTok Business API.

This module contains the models every resource module builds on:

- The response envelope wrapping every API answer
- Pagination metadata and the generic paginated list
- Base classes for request and response models
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class BaseAPIResponse(BaseModel):
    """Base model for all API response payloads.

    Unknown fields are kept rather than rejected, since the API adds
    fields to its records over time.
    """

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields from API
        populate_by_name=True,  # Allow field population by alias
    )


class BaseAPIRequest(BaseModel):
    """Base model for request objects.

    Optional fields default to ``None``, which means "unset": they are
    left out of query strings and JSON bodies so the server applies its
    own defaults.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_body(self) -> Dict[str, Any]:
        """Serialize the request as a JSON body, dropping unset fields.

        :return: JSON-compatible dictionary
        :rtype: Dict[str, Any]
        """
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class Envelope(BaseModel):
    """Uniform top-level wrapper around every API response.

    :param code: Result code, ``0`` on success
    :type code: Optional[int]
    :param message: Human-readable result message
    :type message: Optional[str]
    :param request_id: Server-side request identifier
    :type request_id: Optional[str]
    :param data: Opaque payload, decoded later into a typed model
    :type data: Any
    """

    model_config = ConfigDict(extra="allow")

    code: Optional[int] = None
    message: Optional[str] = None
    request_id: Optional[str] = None
    data: Any = None

    @property
    def is_success(self) -> bool:
        """Whether the envelope reports success (missing code counts as success)."""
        return self.code is None or self.code == 0


class PageInfo(BaseModel):
    """Pagination metadata returned alongside list results."""

    page: int = 0
    page_size: int = 0
    total_number: int = 0
    total_page: int = 0


class ItemList(BaseAPIResponse, Generic[T]):
    """Unpaginated list result: ``{"list": [...]}``.

    The JSON ``list`` key is exposed as :attr:`items` (and through the
    :attr:`list` property) to avoid shadowing the builtin inside the
    class body.
    """

    items: List[T] = Field(default_factory=list, alias="list")

    @property
    def list(self) -> List[T]:
        return self.items


class PagedList(ItemList[T], Generic[T]):
    """Paginated list result: ``{"list": [...], "page_info": {...}}``."""

    page_info: PageInfo = Field(default_factory=PageInfo)

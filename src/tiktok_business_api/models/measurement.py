"""Pixel and offline event set models."""

from typing import Any, List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, PagedList


class Pixel(BaseAPIResponse):
    pixel_id: Optional[str] = None
    pixel_name: Optional[str] = None
    pixel_code: Optional[str] = None
    advertiser_id: Optional[str] = None
    pixel_status: Optional[str] = None
    create_time: Optional[str] = None
    last_update_time: Optional[str] = None


class PixelListRequest(BaseAPIRequest):
    advertiser_id: str
    pixel_id: Optional[str] = None
    code: Optional[str] = None
    name: Optional[str] = None
    order_by: Optional[str] = None
    filtering: Optional[Any] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class PixelListResponse(PagedList[Pixel]):
    pass


class OfflineEventSet(BaseAPIResponse):
    event_set_id: Optional[str] = None
    name: Optional[str] = None
    advertiser_id: Optional[str] = None
    status: Optional[str] = None
    create_time: Optional[str] = None
    update_time: Optional[str] = None


class OfflineGetRequest(BaseAPIRequest):
    advertiser_id: Optional[str] = None
    event_set_ids: Optional[List[str]] = None
    name: Optional[str] = None


class OfflineGetResponse(PagedList[OfflineEventSet]):
    pass

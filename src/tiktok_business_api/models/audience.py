"""Custom audience (DMP) models."""

from typing import List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, ItemList, PagedList


class CustomAudience(BaseAPIResponse):
    custom_audience_id: Optional[str] = None
    name: Optional[str] = None
    audience_type: Optional[str] = None
    size: Optional[int] = None
    status: Optional[str] = None
    share_status: Optional[str] = None
    create_time: Optional[str] = None
    modify_time: Optional[str] = None
    advertiser_id: Optional[str] = None
    lookalike_type: Optional[str] = None


class CustomAudienceGetRequest(BaseAPIRequest):
    advertiser_id: str
    custom_audience_ids: List[str]
    history_size: Optional[int] = None


class CustomAudienceGetResponse(ItemList[CustomAudience]):
    pass


class CustomAudienceListRequest(BaseAPIRequest):
    advertiser_id: str
    custom_audience_ids: Optional[List[str]] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class CustomAudienceListResponse(PagedList[CustomAudience]):
    pass

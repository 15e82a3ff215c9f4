"""Ad models."""

from typing import List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, PagedList


class AdFiltering(BaseAPIRequest):
    """Filtering options for listing ads."""

    ad_ids: Optional[List[str]] = None
    adgroup_ids: Optional[List[str]] = None
    campaign_ids: Optional[List[str]] = None
    primary_status: Optional[str] = None
    secondary_status: Optional[str] = None
    objective_type: Optional[str] = None
    create_time_min: Optional[str] = None
    create_time_max: Optional[str] = None


class GetAdRequest(BaseAPIRequest):
    advertiser_id: str
    filtering: Optional[AdFiltering] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    fields: Optional[List[str]] = None


class Ad(BaseAPIResponse):
    """An ad record as returned by ``ad/get``."""

    ad_id: Optional[str] = None
    ad_name: Optional[str] = None
    adgroup_id: Optional[str] = None
    campaign_id: Optional[str] = None
    advertiser_id: Optional[str] = None
    image_ids: Optional[List[str]] = None
    video_id: Optional[str] = None
    ad_text: Optional[str] = None
    call_to_action: Optional[str] = None
    operation_status: Optional[str] = None
    primary_status: Optional[str] = None
    secondary_status: Optional[str] = None
    create_time: Optional[str] = None
    modify_time: Optional[str] = None


class GetAdResponse(PagedList[Ad]):
    pass


class AdCreative(BaseAPIRequest):
    """One creative inside a ``CreateAdRequest``."""

    ad_name: str
    ad_text: str
    ad_format: str
    video_id: Optional[str] = None
    image_ids: Optional[List[str]] = None
    call_to_action: Optional[str] = None
    display_name: Optional[str] = None
    landing_page_url: Optional[str] = None
    identity_id: Optional[str] = None
    identity_type: Optional[str] = None


class CreateAdRequest(BaseAPIRequest):
    """Simplified body for ``ad/create``.

    The endpoint accepts many more fields; the common ones are modelled
    here.
    """

    advertiser_id: str
    adgroup_id: str
    creatives: List[AdCreative]
    operation_status: Optional[str] = None
    identity_id: Optional[str] = None
    identity_type: Optional[str] = None


class CreateAdResponse(BaseAPIResponse):
    ad_id: str = ""

"""Creative models."""

from typing import List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, PagedList


class CreativeFiltering(BaseAPIRequest):
    creative_ids: Optional[List[str]] = None
    ad_ids: Optional[List[str]] = None
    adgroup_ids: Optional[List[str]] = None
    campaign_ids: Optional[List[str]] = None
    creative_type: Optional[str] = None
    objective_type: Optional[str] = None
    operation_status: Optional[str] = None
    create_time_min: Optional[str] = None
    create_time_max: Optional[str] = None


class GetCreativesRequest(BaseAPIRequest):
    advertiser_id: str
    filtering: Optional[CreativeFiltering] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    fields: Optional[List[str]] = None


class Creative(BaseAPIResponse):
    creative_id: Optional[str] = None
    creative_name: Optional[str] = None
    ad_id: Optional[str] = None
    adgroup_id: Optional[str] = None
    campaign_id: Optional[str] = None
    advertiser_id: Optional[str] = None
    creative_type: Optional[str] = None
    image_ids: Optional[List[str]] = None
    video_id: Optional[str] = None
    ad_text: Optional[str] = None
    ad_format: Optional[str] = None
    call_to_action: Optional[str] = None
    landing_page_url: Optional[str] = None
    display_name: Optional[str] = None
    identity_id: Optional[str] = None
    identity_type: Optional[str] = None
    card_id: Optional[str] = None
    operation_status: Optional[str] = None
    create_time: Optional[str] = None
    modify_time: Optional[str] = None
    video_view_tracking_url: Optional[str] = None
    click_tracking_url: Optional[str] = None
    impression_tracking_url: Optional[str] = None


class GetCreativesResponse(PagedList[Creative]):
    pass

"""Ad group models."""

from typing import List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, PagedList


class AdGroupFiltering(BaseAPIRequest):
    """Filtering options for listing ad groups."""

    adgroup_ids: Optional[List[str]] = None
    campaign_ids: Optional[List[str]] = None
    primary_status: Optional[str] = None
    secondary_status: Optional[str] = None
    objective_type: Optional[str] = None
    billing_event: Optional[str] = None
    create_time_min: Optional[str] = None
    create_time_max: Optional[str] = None


class GetAdGroupRequest(BaseAPIRequest):
    advertiser_id: str
    filtering: Optional[AdGroupFiltering] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    fields: Optional[List[str]] = None


class AdGroup(BaseAPIResponse):
    """An ad group record as returned by ``adgroup/get``."""

    adgroup_id: Optional[str] = None
    adgroup_name: Optional[str] = None
    campaign_id: Optional[str] = None
    advertiser_id: Optional[str] = None
    objective_type: Optional[str] = None
    budget: Optional[float] = None
    budget_mode: Optional[str] = None
    billing_event: Optional[str] = None
    optimization_goal: Optional[str] = None
    placements: Optional[List[str]] = None
    locations: Optional[List[str]] = None
    age: Optional[List[str]] = None
    gender: Optional[str] = None
    languages: Optional[List[str]] = None
    operation_status: Optional[str] = None
    primary_status: Optional[str] = None
    secondary_status: Optional[str] = None
    create_time: Optional[str] = None
    modify_time: Optional[str] = None
    schedule_start_time: Optional[str] = None
    schedule_end_time: Optional[str] = None


class GetAdGroupResponse(PagedList[AdGroup]):
    pass


class CreateAdGroupRequest(BaseAPIRequest):
    """Simplified body for ``adgroup/create``.

    ``placements`` and ``location_ids`` are always sent, even when empty.
    """

    advertiser_id: str
    campaign_id: str
    adgroup_name: str
    placement_type: str
    placements: List[str]
    location_ids: List[str]
    budget_mode: str
    billing_event: str
    optimization_goal: str
    promotion_type: Optional[str] = None
    languages: Optional[List[str]] = None
    gender: Optional[str] = None
    age_groups: Optional[List[str]] = None
    budget: Optional[float] = None
    schedule_type: Optional[str] = None
    schedule_start_time: Optional[str] = None
    schedule_end_time: Optional[str] = None
    bid_price: Optional[float] = None
    pacing: Optional[str] = None
    pixel_id: Optional[str] = None
    operation_status: Optional[str] = None


class CreateAdGroupResponse(BaseAPIResponse):
    adgroup_id: str = ""

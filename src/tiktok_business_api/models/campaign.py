"""Campaign models."""

from typing import List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, PagedList


class CampaignFiltering(BaseAPIRequest):
    """Filtering options for listing campaigns."""

    campaign_ids: Optional[List[str]] = None
    campaign_name: Optional[str] = None
    objective_type: Optional[str] = None
    primary_status: Optional[str] = None
    secondary_status: Optional[str] = None
    create_time_min: Optional[str] = None
    create_time_max: Optional[str] = None


class GetCampaignRequest(BaseAPIRequest):
    advertiser_id: str
    filtering: Optional[CampaignFiltering] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class Campaign(BaseAPIResponse):
    """A campaign record as returned by ``campaign/get``."""

    campaign_id: Optional[str] = None
    campaign_name: Optional[str] = None
    advertiser_id: Optional[str] = None
    objective_type: Optional[str] = None
    budget: Optional[float] = None
    budget_mode: Optional[str] = None
    operation_status: Optional[str] = None
    create_time: Optional[str] = None
    modify_time: Optional[str] = None


class GetCampaignResponse(PagedList[Campaign]):
    pass


class CreateCampaignRequest(BaseAPIRequest):
    """Body for ``campaign/create``.

    Only ``advertiser_id``, ``campaign_name`` and ``objective_type`` are
    required; everything else is sent only when set.
    """

    advertiser_id: str
    campaign_name: str
    objective_type: str
    app_id: Optional[str] = None
    app_promotion_type: Optional[str] = None
    budget: Optional[float] = None
    budget_mode: Optional[str] = None
    budget_optimize_on: Optional[bool] = None
    campaign_type: Optional[str] = None
    operation_status: Optional[str] = None
    optimization_goal: Optional[str] = None
    rf_campaign_type: Optional[str] = None
    special_industries: Optional[List[str]] = None


class CreateCampaignResponse(BaseAPIResponse):
    campaign_id: str = ""

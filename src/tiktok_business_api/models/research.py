"""Research ad library models."""

from typing import List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, PagedList


class AdReport(BaseAPIResponse):
    """One ad from the research ad library, with delivery statistics."""

    ad_id: Optional[str] = None
    ad_name: Optional[str] = None
    advertiser_id: Optional[str] = None
    advertiser_name: Optional[str] = None
    campaign_id: Optional[str] = None
    campaign_name: Optional[str] = None
    adgroup_id: Optional[str] = None
    adgroup_name: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    language: Optional[str] = None
    platform: Optional[str] = None
    objective_type: Optional[str] = None
    call_to_action: Optional[str] = None
    video_id: Optional[str] = None
    video_title: Optional[str] = None
    video_duration: Optional[float] = None
    thumbnail_url: Optional[str] = None
    landing_page_url: Optional[str] = None
    display_name: Optional[str] = None
    profile_image: Optional[str] = None
    ad_text: Optional[str] = None
    impressions: Optional[int] = None
    clicks: Optional[int] = None
    ctr: Optional[float] = None
    reach: Optional[int] = None
    frequency: Optional[float] = None
    likes: Optional[int] = None
    comments: Optional[int] = None
    shares: Optional[int] = None
    video_views: Optional[int] = None
    video_view_rate: Optional[float] = None
    average_video_play: Optional[float] = None
    first_shown_date: Optional[str] = None
    last_shown_date: Optional[str] = None
    stat_time_period: Optional[str] = None


class AdReportFiltering(BaseAPIRequest):
    country_codes: Optional[List[str]] = None
    region_ids: Optional[List[str]] = None
    languages: Optional[List[str]] = None
    platforms: Optional[List[str]] = None
    objective_types: Optional[List[str]] = None
    advertiser_ids: Optional[List[str]] = None
    advertiser_name: Optional[str] = None
    ad_text: Optional[str] = None
    video_title: Optional[str] = None
    first_shown_date_min: Optional[str] = None
    first_shown_date_max: Optional[str] = None
    last_shown_date_min: Optional[str] = None
    last_shown_date_max: Optional[str] = None


class GetAdReportRequest(BaseAPIRequest):
    """Query for the research ad library.

    :param search_term: Required search term
    :param country_code: ISO 3166-1 alpha-2 country code
    """

    search_term: str
    country_code: Optional[str] = None
    filtering: Optional[AdReportFiltering] = None
    fields: Optional[List[str]] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    order_by: Optional[str] = None
    order_field: Optional[str] = None


class GetAdReportResponse(PagedList[AdReport]):
    pass

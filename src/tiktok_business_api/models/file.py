"""Asset library (video and image) models."""

from typing import List, Optional, Union

from .common import BaseAPIRequest, BaseAPIResponse, ItemList, PagedList

MAX_VIDEO_IDS = 60
MAX_IMAGE_IDS = 100


class Video(BaseAPIResponse):
    """A video in the advertiser's asset library."""

    video_id: Optional[str] = None
    file_name: Optional[str] = None
    format: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[float] = None
    size: Optional[int] = None
    material_id: Optional[str] = None
    poster_url: Optional[str] = None
    preview_url: Optional[str] = None
    # Returned either as a timestamp or as a formatted string
    preview_url_expire_time: Optional[Union[int, str]] = None
    bit_rate: Optional[int] = None
    allow_download: Optional[bool] = None
    allowed_placements: Optional[List[str]] = None
    create_time: Optional[str] = None
    modify_time: Optional[str] = None


class GetVideoInfoRequest(BaseAPIRequest):
    advertiser_id: str
    video_ids: List[str]


class GetVideoInfoResponse(ItemList[Video]):
    pass


class VideoSearchFiltering(BaseAPIRequest):
    video_ids: Optional[List[str]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    ratio: Optional[List[str]] = None
    video_tags: Optional[List[str]] = None
    create_time_min: Optional[str] = None
    create_time_max: Optional[str] = None


class SearchVideosRequest(BaseAPIRequest):
    advertiser_id: str
    filtering: Optional[VideoSearchFiltering] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class SearchVideosResponse(PagedList[Video]):
    pass


class Image(BaseAPIResponse):
    """An image in the advertiser's asset library."""

    image_id: Optional[str] = None
    file_name: Optional[str] = None
    format: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    size: Optional[int] = None
    material_id: Optional[str] = None
    image_url: Optional[str] = None
    signature: Optional[str] = None
    allowed_placements: Optional[List[str]] = None
    create_time: Optional[str] = None
    modify_time: Optional[str] = None


class GetImageInfoRequest(BaseAPIRequest):
    advertiser_id: str
    image_ids: List[str]


class GetImageInfoResponse(ItemList[Image]):
    pass

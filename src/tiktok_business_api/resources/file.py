"""Asset library endpoints for videos and images."""

from pathlib import Path
from typing import Optional, Sequence, Union

from ..client import api_path, do_get
from ..exceptions import ValidationError
from ..models.file import (
    MAX_IMAGE_IDS,
    MAX_VIDEO_IDS,
    GetImageInfoRequest,
    GetImageInfoResponse,
    GetVideoInfoRequest,
    GetVideoInfoResponse,
    SearchVideosRequest,
    SearchVideosResponse,
)
from ..utils.download import download_to_path
from ..utils.params import (
    QueryParams,
    add_json_param,
    add_pagination,
    add_string_slice,
)
from .base import BaseAPI


def _check_ids(field: str, ids: Optional[Sequence[str]], limit: int) -> None:
    if not ids:
        raise ValidationError(f"{field} cannot be empty", field=field)
    if len(ids) > limit:
        raise ValidationError(
            f"{field} cannot exceed {limit} items", field=field, value=len(ids)
        )


class FileAPI(BaseAPI):
    """Look up, search and download library assets."""

    async def get_video_info(self, request: GetVideoInfoRequest) -> GetVideoInfoResponse:
        """Get details for up to 60 videos.

        :raises ValidationError: If no ids or more than 60 ids are given
        """
        _check_ids("video_ids", request.video_ids, MAX_VIDEO_IDS)
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_string_slice(params, "video_ids", request.video_ids)
        return await do_get(
            self._client, api_path("file/video/ad/info"), params, GetVideoInfoResponse
        )

    async def search_videos(self, request: SearchVideosRequest) -> SearchVideosResponse:
        """Search videos in the asset library."""
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_pagination(params, request.page, request.page_size)
        add_json_param(params, "filtering", request.filtering)
        return await do_get(
            self._client,
            api_path("file/video/ad/search"),
            params,
            SearchVideosResponse,
        )

    async def get_image_info(self, request: GetImageInfoRequest) -> GetImageInfoResponse:
        """Get details for up to 100 images.

        :raises ValidationError: If no ids or more than 100 ids are given
        """
        _check_ids("image_ids", request.image_ids, MAX_IMAGE_IDS)
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_string_slice(params, "image_ids", request.image_ids)
        return await do_get(
            self._client, api_path("file/image/ad/info"), params, GetImageInfoResponse
        )

    async def download_video(
        self,
        url: str,
        output_dir: Union[str, Path] = ".",
        file_name: Optional[str] = None,
    ) -> Path:
        """Download a video (e.g. a ``preview_url``) to a local file.

        :param url: Video URL
        :type url: str
        :param output_dir: Directory to write into, created when missing
        :type output_dir: Union[str, Path]
        :param file_name: File name, ``video.mp4`` by default
        :type file_name: Optional[str]
        :return: Path of the written file
        :rtype: Path
        """
        return await download_to_path(
            self._client.http_client, url, output_dir, file_name, "video.mp4"
        )

    async def download_image(
        self,
        url: str,
        output_dir: Union[str, Path] = ".",
        file_name: Optional[str] = None,
    ) -> Path:
        """Download an image (e.g. an ``image_url``) to a local file."""
        return await download_to_path(
            self._client.http_client, url, output_dir, file_name, "image.jpg"
        )

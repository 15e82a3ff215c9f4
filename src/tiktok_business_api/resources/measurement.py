"""Pixel and offline event set endpoints."""

from ..client import api_path, do_get
from ..models.measurement import (
    OfflineGetRequest,
    OfflineGetResponse,
    PixelListRequest,
    PixelListResponse,
)
from ..utils.params import (
    QueryParams,
    add_json_param,
    add_optional,
    add_pagination,
    add_string_slice,
)
from .base import BaseAPI


class MeasurementAPI(BaseAPI):
    async def list_pixels(self, request: PixelListRequest) -> PixelListResponse:
        """List pixels of an advertiser."""
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_optional(params, "pixel_id", request.pixel_id)
        add_optional(params, "code", request.code)
        add_optional(params, "name", request.name)
        add_optional(params, "order_by", request.order_by)
        add_json_param(params, "filtering", request.filtering)
        add_pagination(params, request.page, request.page_size)
        return await do_get(
            self._client, api_path("pixel/list"), params, PixelListResponse
        )

    async def get_offline_event_sets(
        self, request: OfflineGetRequest
    ) -> OfflineGetResponse:
        """Get offline event sets."""
        params: QueryParams = {}
        add_optional(params, "advertiser_id", request.advertiser_id)
        add_string_slice(params, "event_set_ids", request.event_set_ids)
        add_optional(params, "name", request.name)
        return await do_get(
            self._client, api_path("offline/get"), params, OfflineGetResponse
        )

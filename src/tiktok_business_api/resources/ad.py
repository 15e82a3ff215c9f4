"""Ad management endpoints."""

from ..client import api_path, do_get, do_post
from ..models.ad import CreateAdRequest, CreateAdResponse, GetAdRequest, GetAdResponse
from ..utils.params import (
    QueryParams,
    add_json_param,
    add_pagination,
    add_string_slice,
)
from .base import BaseAPI


class AdAPI(BaseAPI):
    """Read and create ads."""

    async def get_ads(self, request: GetAdRequest) -> GetAdResponse:
        """List ads of an advertiser.

        :param request: Advertiser, optional filtering, fields and pagination
        :type request: GetAdRequest
        :return: One page of ads
        :rtype: GetAdResponse
        """
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_pagination(params, request.page, request.page_size)
        add_string_slice(params, "fields", request.fields)
        add_json_param(params, "filtering", request.filtering)
        return await do_get(self._client, api_path("ad/get"), params, GetAdResponse)

    async def create_ad(self, request: CreateAdRequest) -> CreateAdResponse:
        """Create ads in an ad group from one or more creatives."""
        return await do_post(
            self._client, api_path("ad/create"), request, CreateAdResponse
        )

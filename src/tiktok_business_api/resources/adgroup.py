"""Ad group management endpoints."""

from ..client import api_path, do_get, do_post
from ..models.adgroup import (
    CreateAdGroupRequest,
    CreateAdGroupResponse,
    GetAdGroupRequest,
    GetAdGroupResponse,
)
from ..utils.params import (
    QueryParams,
    add_json_param,
    add_pagination,
    add_string_slice,
)
from .base import BaseAPI


class AdGroupAPI(BaseAPI):
    """Read and create ad groups."""

    async def get_adgroups(self, request: GetAdGroupRequest) -> GetAdGroupResponse:
        """List ad groups of an advertiser.

        :param request: Advertiser, optional filtering, fields and pagination
        :type request: GetAdGroupRequest
        :return: One page of ad groups
        :rtype: GetAdGroupResponse
        """
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_pagination(params, request.page, request.page_size)
        add_string_slice(params, "fields", request.fields)
        add_json_param(params, "filtering", request.filtering)
        return await do_get(
            self._client, api_path("adgroup/get"), params, GetAdGroupResponse
        )

    async def create_adgroup(
        self, request: CreateAdGroupRequest
    ) -> CreateAdGroupResponse:
        return await do_post(
            self._client, api_path("adgroup/create"), request, CreateAdGroupResponse
        )

"""Campaign management endpoints."""

from ..client import api_path, do_get, do_post
from ..models.campaign import (
    CreateCampaignRequest,
    CreateCampaignResponse,
    GetCampaignRequest,
    GetCampaignResponse,
)
from ..utils.params import QueryParams, add_json_param, add_pagination
from .base import BaseAPI


class CampaignAPI(BaseAPI):
    """Read and create campaigns."""

    async def get_campaigns(self, request: GetCampaignRequest) -> GetCampaignResponse:
        """List campaigns of an advertiser.

        :param request: Advertiser, optional filtering and pagination
        :type request: GetCampaignRequest
        :return: One page of campaigns
        :rtype: GetCampaignResponse
        """
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_pagination(params, request.page, request.page_size)
        add_json_param(params, "filtering", request.filtering)
        return await do_get(
            self._client, api_path("campaign/get"), params, GetCampaignResponse
        )

    async def create_campaign(
        self, request: CreateCampaignRequest
    ) -> CreateCampaignResponse:
        """Create a campaign.

        :param request: Campaign definition
        :type request: CreateCampaignRequest
        :return: ID of the new campaign
        :rtype: CreateCampaignResponse
        """
        return await do_post(
            self._client, api_path("campaign/create"), request, CreateCampaignResponse
        )

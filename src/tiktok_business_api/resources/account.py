"""Advertiser account endpoints."""

from typing import Optional, Sequence

from ..client import api_path, do_get
from ..models.account import AdvertiserInfoResponse
from ..utils.params import QueryParams, add_string_slice
from .base import BaseAPI


class AccountAPI(BaseAPI):
    async def get_advertiser_info(
        self,
        advertiser_ids: Sequence[str],
        fields: Optional[Sequence[str]] = None,
    ) -> AdvertiserInfoResponse:
        """Get account details for the given advertisers.

        :param advertiser_ids: Advertiser IDs to look up
        :type advertiser_ids: Sequence[str]
        :param fields: Fields to return; all default fields when omitted
        :type fields: Optional[Sequence[str]]
        :return: One entry per advertiser
        :rtype: AdvertiserInfoResponse
        """
        params: QueryParams = {}
        add_string_slice(params, "advertiser_ids", advertiser_ids)
        add_string_slice(params, "fields", fields)
        return await do_get(
            self._client, api_path("advertiser/info"), params, AdvertiserInfoResponse
        )

"""Custom audience (DMP) endpoints.

Unlike most endpoints, these read audience id lists as repeated query
keys rather than a JSON array.
"""

from ..client import api_path, do_get
from ..models.audience import (
    CustomAudienceGetRequest,
    CustomAudienceGetResponse,
    CustomAudienceListRequest,
    CustomAudienceListResponse,
)
from ..utils.params import QueryParams, add_optional, add_pagination, add_repeated
from .base import BaseAPI


class AudienceAPI(BaseAPI):
    """Read custom audiences."""

    async def get_custom_audiences(
        self, request: CustomAudienceGetRequest
    ) -> CustomAudienceGetResponse:
        """Get details of the given audiences."""
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_repeated(params, "custom_audience_ids", request.custom_audience_ids)
        add_optional(params, "history_size", request.history_size)
        return await do_get(
            self._client,
            api_path("dmp/custom_audience/get"),
            params,
            CustomAudienceGetResponse,
        )

    async def list_custom_audiences(
        self, request: CustomAudienceListRequest
    ) -> CustomAudienceListResponse:
        """List all audiences of an advertiser, one page at a time."""
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_repeated(params, "custom_audience_ids", request.custom_audience_ids)
        add_pagination(params, request.page, request.page_size)
        return await do_get(
            self._client,
            api_path("dmp/custom_audience/list"),
            params,
            CustomAudienceListResponse,
        )

"""Creative endpoints."""

from typing import List

from ..client import api_path, collect_all_pages, do_get
from ..models.creative import Creative, GetCreativesRequest, GetCreativesResponse
from ..utils.params import (
    QueryParams,
    add_json_param,
    add_pagination,
    add_string_slice,
)
from .base import BaseAPI


class CreativeAPI(BaseAPI):
    async def get_creatives(self, request: GetCreativesRequest) -> GetCreativesResponse:
        """List creatives of an advertiser, one page at a time."""
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_pagination(params, request.page, request.page_size)
        add_string_slice(params, "fields", request.fields)
        add_json_param(params, "filtering", request.filtering)
        return await do_get(
            self._client, api_path("creative/get"), params, GetCreativesResponse
        )

    async def get_all_creatives(
        self, request: GetCreativesRequest, page_size: int = 100
    ) -> List[Creative]:
        """Fetch every page of :meth:`get_creatives`.

        Any ``page``/``page_size`` on ``request`` is ignored.
        """
        return await collect_all_pages(self.get_creatives, request, page_size)

"""Tool endpoints returning reference data."""

from typing import Optional, Sequence

from ..client import api_path, do_get
from ..models.tool import ActionCategoryResponse, CarrierResponse, LanguageResponse
from ..utils.params import QueryParams, add_repeated
from .base import BaseAPI


class ToolAPI(BaseAPI):
    async def get_carriers(self, advertiser_id: str) -> CarrierResponse:
        """Get the carriers available for targeting."""
        params: QueryParams = {"advertiser_id": advertiser_id}
        return await do_get(
            self._client, api_path("tool/carrier"), params, CarrierResponse
        )

    async def get_languages(self, advertiser_id: str) -> LanguageResponse:
        """Get the languages available for targeting."""
        params: QueryParams = {"advertiser_id": advertiser_id}
        return await do_get(
            self._client, api_path("tool/language"), params, LanguageResponse
        )

    async def get_action_categories(
        self,
        advertiser_id: str,
        special_industries: Optional[Sequence[str]] = None,
    ) -> ActionCategoryResponse:
        """Get action categories, optionally limited to special industries."""
        params: QueryParams = {"advertiser_id": advertiser_id}
        add_repeated(params, "special_industries", special_industries)
        return await do_get(
            self._client,
            api_path("tool/action_category"),
            params,
            ActionCategoryResponse,
        )

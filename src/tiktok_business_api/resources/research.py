"""Research ad library endpoints."""

from typing import List

from ..client import collect_all_pages, do_get
from ..models.research import AdReport, GetAdReportRequest, GetAdReportResponse
from ..utils.params import (
    QueryParams,
    add_json_param,
    add_optional,
    add_pagination,
    add_string_slice,
)
from .base import BaseAPI

AD_REPORT_PATH = "/v2/research/adlib/ad/report/"


class ResearchAPI(BaseAPI):
    """Query TikTok's public ad library for research purposes."""

    async def get_ad_report(self, request: GetAdReportRequest) -> GetAdReportResponse:
        """Search the ad library.

        :param request: Search term with optional filtering and sorting
        :type request: GetAdReportRequest
        :return: One page of matching ads
        :rtype: GetAdReportResponse
        """
        params: QueryParams = {"search_term": request.search_term}
        add_optional(params, "country_code", request.country_code)
        add_pagination(params, request.page, request.page_size)
        add_string_slice(params, "fields", request.fields)
        add_json_param(params, "filtering", request.filtering)
        add_optional(params, "order_by", request.order_by)
        add_optional(params, "order_field", request.order_field)
        return await do_get(self._client, AD_REPORT_PATH, params, GetAdReportResponse)

    async def get_all_ad_reports(
        self, request: GetAdReportRequest, page_size: int = 100
    ) -> List[AdReport]:
        """Fetch every page of :meth:`get_ad_report`."""
        return await collect_all_pages(self.get_ad_report, request, page_size)

"""Reporting endpoints.

Covers the synchronous integrated report, async report task status and
the Smart+ material reports.
"""

from ..client import api_path, do_get
from ..models.reporting import (
    IntegratedReportRequest,
    IntegratedReportResponse,
    MaterialReportBreakdownRequest,
    MaterialReportOverviewRequest,
    MaterialReportResponse,
    ReportTask,
)
from ..utils.params import (
    QueryParams,
    add_json_param,
    add_optional,
    add_pagination,
    add_repeated,
    add_string_slice,
)
from .base import BaseAPI


class ReportingAPI(BaseAPI):
    """Run reports and check report tasks."""

    async def get_integrated_report(
        self, request: IntegratedReportRequest
    ) -> IntegratedReportResponse:
        """Run a synchronous report.

        ``dimensions`` and ``metrics`` are sent as JSON arrays while
        ``advertiser_ids`` is sent as repeated keys.

        :param request: Report definition
        :type request: IntegratedReportRequest
        :return: One page of report rows, plus totals when requested
        :rtype: IntegratedReportResponse
        """
        params: QueryParams = {"report_type": request.report_type}
        add_optional(params, "advertiser_id", request.advertiser_id)
        add_repeated(params, "advertiser_ids", request.advertiser_ids)
        add_optional(params, "bc_id", request.bc_id)
        add_optional(params, "service_type", request.service_type)
        add_optional(params, "data_level", request.data_level)
        add_string_slice(params, "dimensions", request.dimensions)
        add_string_slice(params, "metrics", request.metrics)
        add_optional(params, "start_date", request.start_date)
        add_optional(params, "end_date", request.end_date)
        add_optional(params, "query_lifetime", request.query_lifetime)
        add_pagination(params, request.page, request.page_size)
        add_optional(params, "order_field", request.order_field)
        add_optional(params, "order_type", request.order_type)
        add_optional(params, "enable_total_metrics", request.enable_total_metrics)
        add_optional(
            params,
            "multi_adv_report_in_utc_time",
            request.multi_adv_report_in_utc_time,
        )
        add_optional(params, "query_mode", request.query_mode)
        add_json_param(params, "filtering", request.filtering)
        return await do_get(
            self._client,
            api_path("report/integrated/get"),
            params,
            IntegratedReportResponse,
        )

    async def check_report_task(self, task_id: str, advertiser_id: str) -> ReportTask:
        """Get the status of an async report task."""
        params: QueryParams = {"task_id": task_id, "advertiser_id": advertiser_id}
        return await do_get(
            self._client, api_path("report/task/check"), params, ReportTask
        )

    async def get_material_report_breakdown(
        self, request: MaterialReportBreakdownRequest
    ) -> MaterialReportResponse:
        """Get the Smart+ material report broken down by the given dimensions."""
        params: QueryParams = {
            "advertiser_id": request.advertiser_id,
            "start_date": request.start_date,
            "end_date": request.end_date,
        }
        add_string_slice(params, "dimensions", request.dimensions)
        add_string_slice(params, "metrics", request.metrics)
        add_json_param(params, "filtering", request.filtering)
        add_optional(params, "sort_field", request.sort_field)
        add_optional(params, "sort_type", request.sort_type)
        add_pagination(params, request.page, request.page_size)
        return await do_get(
            self._client,
            api_path("smart_plus/material_report/breakdown"),
            params,
            MaterialReportResponse,
        )

    async def get_material_report_overview(
        self, request: MaterialReportOverviewRequest
    ) -> MaterialReportResponse:
        """Get the Smart+ material report overview."""
        params: QueryParams = {"advertiser_id": request.advertiser_id}
        add_string_slice(params, "dimensions", request.dimensions)
        add_string_slice(params, "metrics", request.metrics)
        add_optional(params, "start_date", request.start_date)
        add_optional(params, "end_date", request.end_date)
        add_optional(params, "query_lifetime", request.query_lifetime)
        add_json_param(params, "filtering", request.filtering)
        add_optional(params, "sort_field", request.sort_field)
        add_optional(params, "sort_type", request.sort_type)
        add_pagination(params, request.page, request.page_size)
        return await do_get(
            self._client,
            api_path("smart_plus/material_report/overview"),
            params,
            MaterialReportResponse,
        )

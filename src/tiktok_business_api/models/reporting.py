"""Reporting models.

Report rows have no fixed schema: their keys depend on the requested
dimensions and metrics, so rows are kept as plain dictionaries.
"""

from typing import Any, Dict, List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, PagedList


class IntegratedReportRequest(BaseAPIRequest):
    """Query for a synchronous ``report/integrated/get`` call."""

    report_type: str
    advertiser_id: Optional[str] = None
    advertiser_ids: Optional[List[str]] = None
    bc_id: Optional[str] = None
    service_type: Optional[str] = None
    data_level: Optional[str] = None
    dimensions: Optional[List[str]] = None
    metrics: Optional[List[str]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    query_lifetime: Optional[bool] = None
    page: Optional[int] = None
    page_size: Optional[int] = None
    order_field: Optional[str] = None
    order_type: Optional[str] = None
    enable_total_metrics: Optional[bool] = None
    multi_adv_report_in_utc_time: Optional[bool] = None
    query_mode: Optional[str] = None
    filtering: Optional[Any] = None


class IntegratedReportResponse(PagedList[Dict[str, Any]]):
    total_metrics: Optional[Dict[str, Any]] = None


class ReportTask(BaseAPIResponse):
    """Status of an asynchronous report task."""

    task_id: Optional[str] = None
    status: Optional[str] = None
    download_url: Optional[str] = None
    total_count: Optional[int] = None


class MaterialReportBreakdownRequest(BaseAPIRequest):
    advertiser_id: str
    dimensions: List[str]
    start_date: str
    end_date: str
    metrics: Optional[List[str]] = None
    filtering: Optional[Any] = None
    sort_field: Optional[str] = None
    sort_type: Optional[str] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class MaterialReportOverviewRequest(BaseAPIRequest):
    advertiser_id: str
    dimensions: List[str]
    metrics: Optional[List[str]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    query_lifetime: Optional[bool] = None
    filtering: Optional[Any] = None
    sort_field: Optional[str] = None
    sort_type: Optional[str] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class MaterialReportResponse(PagedList[Dict[str, Any]]):
    pass

"""Unit tests for creative, research and measurement endpoints."""

import json

import pytest

from tiktok_business_api.models import (
    AdReportFiltering,
    CreativeFiltering,
    GetAdReportRequest,
    GetCreativesRequest,
    OfflineGetRequest,
    PixelListRequest,
)
from tiktok_business_api.resources import CreativeAPI, MeasurementAPI, ResearchAPI


@pytest.mark.asyncio
async def test_get_creatives(client, api_server):
    api_server.respond({"list": [{"creative_id": "cr1"}]})

    result = await CreativeAPI(client).get_creatives(
        GetCreativesRequest(
            advertiser_id="123",
            filtering=CreativeFiltering(ad_ids=["a1"]),
            fields=["creative_id"],
        )
    )

    assert result.items[0].creative_id == "cr1"
    params = api_server.last_params()
    assert api_server.last_request.url.path == "/open_api/v1.3/creative/get/"
    assert params["fields"] == '["creative_id"]'
    assert json.loads(params["filtering"]) == {"ad_ids": ["a1"]}


@pytest.mark.asyncio
async def test_get_ad_report_uses_research_path(client, api_server):
    api_server.respond({"list": [{"ad_id": "a1", "impressions": 1000, "ctr": 0.5}]})

    result = await ResearchAPI(client).get_ad_report(
        GetAdReportRequest(
            search_term="shoes",
            country_code="US",
            filtering=AdReportFiltering(platforms=["TIKTOK"]),
        )
    )

    assert result.items[0].impressions == 1000
    params = api_server.last_params()
    assert api_server.last_request.url.path == "/v2/research/adlib/ad/report/"
    assert params["search_term"] == "shoes"
    assert params["country_code"] == "US"
    assert json.loads(params["filtering"]) == {"platforms": ["TIKTOK"]}


@pytest.mark.asyncio
async def test_get_all_ad_reports(client, api_server):
    page_info = {"page_size": 1, "total_number": 2, "total_page": 2}
    api_server.respond({"list": [{"ad_id": "a1"}], "page_info": {"page": 1, **page_info}})
    api_server.respond({"list": [{"ad_id": "a2"}], "page_info": {"page": 2, **page_info}})

    reports = await ResearchAPI(client).get_all_ad_reports(
        GetAdReportRequest(search_term="shoes"), page_size=1
    )

    assert [r.ad_id for r in reports] == ["a1", "a2"]


@pytest.mark.asyncio
async def test_list_pixels(client, api_server):
    api_server.respond({"list": [{"pixel_id": "p1", "pixel_code": "CODE"}]})

    result = await MeasurementAPI(client).list_pixels(
        PixelListRequest(advertiser_id="123", code="CODE", page=1)
    )

    assert result.items[0].pixel_code == "CODE"
    params = api_server.last_params()
    assert api_server.last_request.url.path == "/open_api/v1.3/pixel/list/"
    assert params["code"] == "CODE"
    assert "name" not in params


@pytest.mark.asyncio
async def test_get_offline_event_sets(client, api_server):
    api_server.respond({"list": [{"event_set_id": "e1", "name": "Store"}]})

    result = await MeasurementAPI(client).get_offline_event_sets(
        OfflineGetRequest(advertiser_id="123", event_set_ids=["e1"])
    )

    assert result.items[0].name == "Store"
    params = api_server.last_params()
    assert api_server.last_request.url.path == "/open_api/v1.3/offline/get/"
    assert params["event_set_ids"] == '["e1"]'

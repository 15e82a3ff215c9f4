"""Unit tests for campaign, ad group and ad endpoints."""

import json

import pytest

from tiktok_business_api.models import (
    AdCreative,
    AdFiltering,
    CampaignFiltering,
    CreateAdGroupRequest,
    CreateAdRequest,
    CreateCampaignRequest,
    GetAdGroupRequest,
    GetAdRequest,
    GetCampaignRequest,
)
from tiktok_business_api.resources import AdAPI, AdGroupAPI, CampaignAPI


@pytest.mark.asyncio
async def test_get_campaigns_returns_page(client, api_server):
    api_server.respond({
        "list": [
            {"campaign_id": "c1", "campaign_name": "One", "budget": 50.5},
            {"campaign_id": "c2", "campaign_name": "Two"},
        ],
        "page_info": {"page": 1, "page_size": 10, "total_number": 2, "total_page": 1},
    })

    result = await CampaignAPI(client).get_campaigns(
        GetCampaignRequest(advertiser_id="123", page=1, page_size=10)
    )

    assert len(result.list) == 2
    assert result.items[0].budget == 50.5
    assert result.page_info.total_number == 2
    request = api_server.last_request
    assert request.url.path == "/open_api/v1.3/campaign/get/"
    assert request.url.params["advertiser_id"] == "123"
    assert request.url.params["page"] == "1"
    assert request.url.params["page_size"] == "10"


@pytest.mark.asyncio
async def test_get_campaigns_encodes_filtering(client, api_server):
    api_server.respond({"list": []})

    await CampaignAPI(client).get_campaigns(
        GetCampaignRequest(
            advertiser_id="123",
            filtering=CampaignFiltering(
                campaign_ids=["c1", "c2"], primary_status="ACTIVE"
            ),
        )
    )

    params = api_server.last_params()
    assert json.loads(params["filtering"]) == {
        "campaign_ids": ["c1", "c2"],
        "primary_status": "ACTIVE",
    }
    assert "page" not in params


@pytest.mark.asyncio
async def test_create_campaign(client, api_server):
    api_server.respond({"campaign_id": "c-new"})

    result = await CampaignAPI(client).create_campaign(
        CreateCampaignRequest(
            advertiser_id="123",
            campaign_name="Launch",
            objective_type="TRAFFIC",
            budget_mode="BUDGET_MODE_INFINITE",
        )
    )

    assert result.campaign_id == "c-new"
    assert api_server.last_request.url.path == "/open_api/v1.3/campaign/create/"
    assert api_server.last_json() == {
        "advertiser_id": "123",
        "campaign_name": "Launch",
        "objective_type": "TRAFFIC",
        "budget_mode": "BUDGET_MODE_INFINITE",
    }


@pytest.mark.asyncio
async def test_get_adgroups_sends_fields(client, api_server):
    api_server.respond({"list": [{"adgroup_id": "g1"}]})

    result = await AdGroupAPI(client).get_adgroups(
        GetAdGroupRequest(advertiser_id="123", fields=["adgroup_id", "budget"])
    )

    assert result.items[0].adgroup_id == "g1"
    params = api_server.last_params()
    assert api_server.last_request.url.path == "/open_api/v1.3/adgroup/get/"
    assert params["fields"] == '["adgroup_id","budget"]'
    assert "filtering" not in params


@pytest.mark.asyncio
async def test_create_adgroup(client, api_server):
    api_server.respond({"adgroup_id": "g-new"})

    result = await AdGroupAPI(client).create_adgroup(
        CreateAdGroupRequest(
            advertiser_id="123",
            campaign_id="c1",
            adgroup_name="Group",
            placement_type="PLACEMENT_TYPE_NORMAL",
            placements=["PLACEMENT_TIKTOK"],
            location_ids=["6252001"],
            budget_mode="BUDGET_MODE_DAY",
            budget=20.0,
            billing_event="CPC",
            optimization_goal="CLICK",
        )
    )

    assert result.adgroup_id == "g-new"
    body = api_server.last_json()
    assert api_server.last_request.url.path == "/open_api/v1.3/adgroup/create/"
    assert body["placements"] == ["PLACEMENT_TIKTOK"]
    assert body["budget"] == 20.0


@pytest.mark.asyncio
async def test_get_ads(client, api_server):
    api_server.respond({
        "list": [{"ad_id": "a1", "ad_name": "Ad"}],
        "page_info": {"page": 1, "page_size": 20, "total_number": 1, "total_page": 1},
    })

    result = await AdAPI(client).get_ads(
        GetAdRequest(advertiser_id="123", filtering=AdFiltering(ad_ids=["a1"]))
    )

    assert result.items[0].ad_id == "a1"
    assert api_server.last_request.url.path == "/open_api/v1.3/ad/get/"
    assert json.loads(api_server.last_params()["filtering"]) == {"ad_ids": ["a1"]}


@pytest.mark.asyncio
async def test_create_ad_nests_creatives(client, api_server):
    api_server.respond({"ad_id": "a-new"})

    result = await AdAPI(client).create_ad(
        CreateAdRequest(
            advertiser_id="123",
            adgroup_id="g1",
            creatives=[
                AdCreative(
                    ad_name="Ad", ad_text="Buy now", ad_format="SINGLE_VIDEO",
                    video_id="v1",
                )
            ],
        )
    )

    assert result.ad_id == "a-new"
    assert api_server.last_json()["creatives"] == [
        {"ad_name": "Ad", "ad_text": "Buy now", "ad_format": "SINGLE_VIDEO",
         "video_id": "v1"}
    ]

"""Integration tests wiring the facade to a fake API over httpx."""

import httpx
import pytest

from tiktok_business_api import APIError, TikTokBusinessClient
from tiktok_business_api.config.settings import Settings
from tiktok_business_api.models import GetCampaignRequest
from tiktok_business_api.resources import CampaignAPI


@pytest.mark.integration
@pytest.mark.asyncio
async def test_facade_shares_one_client(http_client):
    tiktok = TikTokBusinessClient.create(
        "tok", base_url="https://business-api.test", http_client=http_client
    )

    assert isinstance(tiktok.campaign, CampaignAPI)
    assert tiktok.campaign.client is tiktok.client
    assert tiktok.file.client is tiktok.client


@pytest.mark.integration
@pytest.mark.asyncio
async def test_facade_round_trip(http_client, api_server):
    api_server.respond({
        "list": [{"campaign_id": "c1"}, {"campaign_id": "c2"}],
        "page_info": {"page": 1, "page_size": 10, "total_number": 2, "total_page": 1},
    })

    async with TikTokBusinessClient.from_settings(
        Settings(_env_file=None, tiktok_api_base_url="https://business-api.test"),
        http_client=http_client,
    ) as tiktok:
        page = await tiktok.campaign.get_campaigns(
            GetCampaignRequest(advertiser_id="123")
        )

    assert [c.campaign_id for c in page.items] == ["c1", "c2"]
    assert api_server.last_request.headers["Access-Token"] == "test-token"
    assert str(api_server.last_request.url).startswith("https://business-api.test/")
    # Caller-supplied http client stays open
    assert not http_client.is_closed


@pytest.mark.integration
@pytest.mark.asyncio
async def test_facade_surfaces_api_errors(http_client, api_server):
    api_server.respond(None, code=40105, message="Access token is invalid")
    tiktok = TikTokBusinessClient.create(
        "expired", base_url="https://business-api.test", http_client=http_client
    )

    with pytest.raises(APIError) as exc_info:
        await tiktok.tool.get_languages("123")

    assert exc_info.value.code == 40105


@pytest.mark.integration
@pytest.mark.asyncio
async def test_facade_owns_http_client_it_creates():
    tiktok = TikTokBusinessClient.create("tok", base_url="https://business-api.test")
    inner = tiktok.client.http_client
    await tiktok.aclose()
    assert inner.is_closed
    assert isinstance(inner, httpx.AsyncClient)

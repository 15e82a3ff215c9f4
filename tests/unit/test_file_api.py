"""Unit tests for asset library lookups."""

import json

import pytest

from tiktok_business_api.exceptions import ValidationError
from tiktok_business_api.models import (
    GetImageInfoRequest,
    GetVideoInfoRequest,
    SearchVideosRequest,
    VideoSearchFiltering,
)
from tiktok_business_api.resources import FileAPI


@pytest.mark.asyncio
async def test_get_video_info(client, api_server):
    api_server.respond({"list": [{"video_id": "v1", "preview_url": "https://cdn.test/v1",
                                  "preview_url_expire_time": "2024-01-01 00:00:00"}]})

    result = await FileAPI(client).get_video_info(
        GetVideoInfoRequest(advertiser_id="123", video_ids=["v1"])
    )

    assert result.items[0].preview_url == "https://cdn.test/v1"
    assert api_server.last_request.url.path == "/open_api/v1.3/file/video/ad/info/"
    assert api_server.last_params()["video_ids"] == '["v1"]'


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, 61])
async def test_get_video_info_rejects_bad_id_count(client, api_server, count):
    ids = [f"v{i}" for i in range(count)]

    with pytest.raises(ValidationError) as exc_info:
        await FileAPI(client).get_video_info(
            GetVideoInfoRequest(advertiser_id="123", video_ids=ids)
        )

    assert exc_info.value.field == "video_ids"
    assert api_server.requests == []


@pytest.mark.asyncio
async def test_get_video_info_accepts_sixty_ids(client, api_server):
    api_server.respond({"list": []})

    await FileAPI(client).get_video_info(
        GetVideoInfoRequest(advertiser_id="123", video_ids=[f"v{i}" for i in range(60)])
    )

    assert len(api_server.requests) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, 101])
async def test_get_image_info_rejects_bad_id_count(client, api_server, count):
    ids = [f"i{i}" for i in range(count)]

    with pytest.raises(ValidationError) as exc_info:
        await FileAPI(client).get_image_info(
            GetImageInfoRequest(advertiser_id="123", image_ids=ids)
        )

    assert exc_info.value.field == "image_ids"
    assert api_server.requests == []


@pytest.mark.asyncio
async def test_get_image_info(client, api_server):
    api_server.respond({"list": [{"image_id": "i1", "width": 100}]})

    result = await FileAPI(client).get_image_info(
        GetImageInfoRequest(advertiser_id="123", image_ids=["i1", "i2"])
    )

    assert result.items[0].width == 100
    assert api_server.last_request.url.path == "/open_api/v1.3/file/image/ad/info/"
    assert api_server.last_params()["image_ids"] == '["i1","i2"]'


@pytest.mark.asyncio
async def test_search_videos(client, api_server):
    api_server.respond({
        "list": [{"video_id": "v1"}],
        "page_info": {"page": 1, "page_size": 20, "total_number": 1, "total_page": 1},
    })

    result = await FileAPI(client).search_videos(
        SearchVideosRequest(
            advertiser_id="123",
            filtering=VideoSearchFiltering(video_tags=["summer"]),
            page=1,
            page_size=20,
        )
    )

    assert result.items[0].video_id == "v1"
    params = api_server.last_params()
    assert api_server.last_request.url.path == "/open_api/v1.3/file/video/ad/search/"
    assert json.loads(params["filtering"]) == {"video_tags": ["summer"]}
    assert params["page_size"] == "20"

"""Facade bundling every resource API over one shared client."""

from typing import Optional

import httpx

from .client import Client
from .config.settings import Settings
from .resources import (
    AccountAPI,
    AdAPI,
    AdGroupAPI,
    AudienceAPI,
    AuthenticationAPI,
    BusinessCenterAPI,
    CampaignAPI,
    CreativeAPI,
    FileAPI,
    MeasurementAPI,
    ReportingAPI,
    ResearchAPI,
    ToolAPI,
)


class TikTokBusinessClient:
    """All resource APIs sharing a single :class:`Client`.

    :param client: Transport client the resource APIs call through
    :type client: Client

    Examples:
        >>> async with TikTokBusinessClient.create("my-token") as tiktok:
        ...     page = await tiktok.campaign.get_campaigns(
        ...         GetCampaignRequest(advertiser_id="123"))
    """

    def __init__(self, client: Client):
        self.client = client
        self.account = AccountAPI(client)
        self.ad = AdAPI(client)
        self.adgroup = AdGroupAPI(client)
        self.audience = AudienceAPI(client)
        self.authentication = AuthenticationAPI(client)
        self.bc = BusinessCenterAPI(client)
        self.campaign = CampaignAPI(client)
        self.creative = CreativeAPI(client)
        self.file = FileAPI(client)
        self.measurement = MeasurementAPI(client)
        self.reporting = ReportingAPI(client)
        self.research = ResearchAPI(client)
        self.tool = ToolAPI(client)

    @classmethod
    def create(
        cls,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> "TikTokBusinessClient":
        """Build the facade and its transport client in one step."""
        return cls(
            Client(
                access_token=access_token,
                base_url=base_url,
                http_client=http_client,
                timeout=timeout,
            )
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "TikTokBusinessClient":
        """Build the facade from ``TIKTOK_*`` environment configuration."""
        return cls(Client.from_settings(settings, http_client=http_client))

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "TikTokBusinessClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

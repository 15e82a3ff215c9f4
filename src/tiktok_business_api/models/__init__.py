"""TikTok Business API models package.

This package contains all Pydantic models used by the client, organized
by API area. Shared envelope and pagination models live in ``common``.
"""

from .account import Advertiser, AdvertiserInfoResponse, Balance
from .ad import (
    Ad,
    AdCreative,
    AdFiltering,
    CreateAdRequest,
    CreateAdResponse,
    GetAdRequest,
    GetAdResponse,
)
from .adgroup import (
    AdGroup,
    AdGroupFiltering,
    CreateAdGroupRequest,
    CreateAdGroupResponse,
    GetAdGroupRequest,
    GetAdGroupResponse,
)
from .audience import (
    CustomAudience,
    CustomAudienceGetRequest,
    CustomAudienceGetResponse,
    CustomAudienceListRequest,
    CustomAudienceListResponse,
)
from .authentication import (
    AccessToken,
    AccessTokenRequest,
    AuthorizedAdvertiser,
    AuthorizedAdvertisersResponse,
)
from .bc import (
    AccountTransactionRequest,
    AccountTransactionResponse,
    Asset,
    AssetGetRequest,
    AssetGetResponse,
    Transaction,
)
from .campaign import (
    Campaign,
    CampaignFiltering,
    CreateCampaignRequest,
    CreateCampaignResponse,
    GetCampaignRequest,
    GetCampaignResponse,
)
from .common import (
    BaseAPIRequest,
    BaseAPIResponse,
    Envelope,
    ItemList,
    PagedList,
    PageInfo,
)
from .creative import (
    Creative,
    CreativeFiltering,
    GetCreativesRequest,
    GetCreativesResponse,
)
from .file import (
    GetImageInfoRequest,
    GetImageInfoResponse,
    GetVideoInfoRequest,
    GetVideoInfoResponse,
    Image,
    SearchVideosRequest,
    SearchVideosResponse,
    Video,
    VideoSearchFiltering,
)
from .measurement import (
    OfflineEventSet,
    OfflineGetRequest,
    OfflineGetResponse,
    Pixel,
    PixelListRequest,
    PixelListResponse,
)
from .reporting import (
    IntegratedReportRequest,
    IntegratedReportResponse,
    MaterialReportBreakdownRequest,
    MaterialReportOverviewRequest,
    MaterialReportResponse,
    ReportTask,
)
from .research import (
    AdReport,
    AdReportFiltering,
    GetAdReportRequest,
    GetAdReportResponse,
)
from .tool import (
    ActionCategory,
    ActionCategoryResponse,
    Carrier,
    CarrierResponse,
    Language,
    LanguageResponse,
)

__all__ = [
    # Common
    "BaseAPIRequest",
    "BaseAPIResponse",
    "Envelope",
    "ItemList",
    "PagedList",
    "PageInfo",
    # Account
    "Advertiser",
    "AdvertiserInfoResponse",
    "Balance",
    # Ad
    "Ad",
    "AdCreative",
    "AdFiltering",
    "CreateAdRequest",
    "CreateAdResponse",
    "GetAdRequest",
    "GetAdResponse",
    # Ad group
    "AdGroup",
    "AdGroupFiltering",
    "CreateAdGroupRequest",
    "CreateAdGroupResponse",
    "GetAdGroupRequest",
    "GetAdGroupResponse",
    # Audience
    "CustomAudience",
    "CustomAudienceGetRequest",
    "CustomAudienceGetResponse",
    "CustomAudienceListRequest",
    "CustomAudienceListResponse",
    # Authentication
    "AccessToken",
    "AccessTokenRequest",
    "AuthorizedAdvertiser",
    "AuthorizedAdvertisersResponse",
    # Business Center
    "AccountTransactionRequest",
    "AccountTransactionResponse",
    "Asset",
    "AssetGetRequest",
    "AssetGetResponse",
    "Transaction",
    # Campaign
    "Campaign",
    "CampaignFiltering",
    "CreateCampaignRequest",
    "CreateCampaignResponse",
    "GetCampaignRequest",
    "GetCampaignResponse",
    # Creative
    "Creative",
    "CreativeFiltering",
    "GetCreativesRequest",
    "GetCreativesResponse",
    # File
    "GetImageInfoRequest",
    "GetImageInfoResponse",
    "GetVideoInfoRequest",
    "GetVideoInfoResponse",
    "Image",
    "SearchVideosRequest",
    "SearchVideosResponse",
    "Video",
    "VideoSearchFiltering",
    # Measurement
    "OfflineEventSet",
    "OfflineGetRequest",
    "OfflineGetResponse",
    "Pixel",
    "PixelListRequest",
    "PixelListResponse",
    # Reporting
    "IntegratedReportRequest",
    "IntegratedReportResponse",
    "MaterialReportBreakdownRequest",
    "MaterialReportOverviewRequest",
    "MaterialReportResponse",
    "ReportTask",
    # Research
    "AdReport",
    "AdReportFiltering",
    "GetAdReportRequest",
    "GetAdReportResponse",
    # Tool
    "ActionCategory",
    "ActionCategoryResponse",
    "Carrier",
    "CarrierResponse",
    "Language",
    "LanguageResponse",
]

"""Resource APIs, one class per TikTok Business API area."""

from .account import AccountAPI
from .ad import AdAPI
from .adgroup import AdGroupAPI
from .audience import AudienceAPI
from .authentication import AuthenticationAPI
from .base import BaseAPI
from .bc import BusinessCenterAPI
from .campaign import CampaignAPI
from .creative import CreativeAPI
from .file import FileAPI
from .measurement import MeasurementAPI
from .reporting import ReportingAPI
from .research import ResearchAPI
from .tool import ToolAPI

__all__ = [
    "AccountAPI",
    "AdAPI",
    "AdGroupAPI",
    "AudienceAPI",
    "AuthenticationAPI",
    "BaseAPI",
    "BusinessCenterAPI",
    "CampaignAPI",
    "CreativeAPI",
    "FileAPI",
    "MeasurementAPI",
    "ReportingAPI",
    "ResearchAPI",
    "ToolAPI",
]

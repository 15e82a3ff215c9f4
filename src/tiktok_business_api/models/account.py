"""Advertiser account models."""

from typing import Optional

from pydantic import Field

from .common import BaseAPIResponse, ItemList


class Advertiser(BaseAPIResponse):
    """Advertiser account details from ``advertiser/info``.

    The API names the display name field ``name``; it is exposed here as
    ``advertiser_name``.
    """

    advertiser_id: Optional[str] = None
    advertiser_name: Optional[str] = Field(None, alias="name")
    address: Optional[str] = None
    brand: Optional[str] = None
    company: Optional[str] = None
    contact_person: Optional[str] = None
    country: Optional[str] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    industry: Optional[str] = None
    language: Optional[str] = None
    license_no: Optional[str] = None
    promotion_area: Optional[str] = None
    promotion_center_city: Optional[str] = None
    reason_for_advertising: Optional[str] = None
    telephone: Optional[str] = None
    timezone: Optional[str] = None
    display_timezone: Optional[str] = None
    advertiser_account_type: Optional[str] = None
    balance_mode: Optional[str] = None
    create_time: Optional[int] = None
    status: Optional[str] = None
    balance: Optional[float] = None


class Balance(BaseAPIResponse):
    balance_type: Optional[str] = None
    balance: Optional[float] = None
    currency: Optional[str] = None


class AdvertiserInfoResponse(ItemList[Advertiser]):
    pass

"""Business Center models."""

from typing import Any, List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, PagedList


class Transaction(BaseAPIResponse):
    """One Business Center or ad account transaction record."""

    transaction_id: Optional[str] = None
    transaction_time: Optional[str] = None
    transaction_type: Optional[str] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    advertiser_id: Optional[str] = None
    advertiser_name: Optional[str] = None
    description: Optional[str] = None
    balance: Optional[float] = None


class AccountTransactionRequest(BaseAPIRequest):
    """Query for ``bc/account/transaction/get``.

    ``filtering`` is free-form; any dict or model is JSON-encoded as is.
    """

    bc_id: Optional[str] = None
    child_bc_id: Optional[str] = None
    transaction_level: Optional[str] = None
    filtering: Optional[Any] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class AccountTransactionResponse(PagedList[Transaction]):
    pass


class Asset(BaseAPIResponse):
    asset_id: Optional[str] = None
    asset_type: Optional[str] = None
    asset_name: Optional[str] = None


class AssetGetRequest(BaseAPIRequest):
    bc_id: str
    asset_type: str
    asset_ids: Optional[List[str]] = None
    page: Optional[int] = None
    page_size: Optional[int] = None


class AssetGetResponse(PagedList[Asset]):
    pass

"""Business Center endpoints."""

from ..client import api_path, do_get
from ..models.bc import (
    AccountTransactionRequest,
    AccountTransactionResponse,
    AssetGetRequest,
    AssetGetResponse,
)
from ..utils.params import (
    QueryParams,
    add_json_param,
    add_optional,
    add_pagination,
    add_string_slice,
)
from .base import BaseAPI


class BusinessCenterAPI(BaseAPI):
    """Read Business Center transactions and assets."""

    async def get_account_transactions(
        self, request: AccountTransactionRequest
    ) -> AccountTransactionResponse:
        """Get the transaction records of a Business Center or its ad accounts."""
        params: QueryParams = {}
        add_optional(params, "bc_id", request.bc_id)
        add_optional(params, "child_bc_id", request.child_bc_id)
        add_optional(params, "transaction_level", request.transaction_level)
        add_json_param(params, "filtering", request.filtering)
        add_pagination(params, request.page, request.page_size)
        return await do_get(
            self._client,
            api_path("bc/account/transaction/get"),
            params,
            AccountTransactionResponse,
        )

    async def get_assets(self, request: AssetGetRequest) -> AssetGetResponse:
        """Get assets of one type in a Business Center."""
        params: QueryParams = {
            "bc_id": request.bc_id,
            "asset_type": request.asset_type,
        }
        add_string_slice(params, "asset_ids", request.asset_ids)
        add_pagination(params, request.page, request.page_size)
        return await do_get(
            self._client, api_path("bc/asset/get"), params, AssetGetResponse
        )

"""OAuth models."""

from typing import List, Optional

from .common import BaseAPIRequest, BaseAPIResponse, ItemList


class AccessTokenRequest(BaseAPIRequest):
    """Body for exchanging an auth code for tokens."""

    app_id: str
    auth_code: str
    secret: str


class AccessToken(BaseAPIResponse):
    """Tokens returned by ``oauth2/access_token``.

    The access token is valid for 24 hours and the refresh token for
    one year.
    """

    access_token: str = ""
    advertiser_ids: Optional[List[str]] = None
    advertiser_id: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    refresh_token_expires_in: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None


class AuthorizedAdvertiser(BaseAPIResponse):
    advertiser_id: Optional[str] = None
    advertiser_name: Optional[str] = None


class AuthorizedAdvertisersResponse(ItemList[AuthorizedAdvertiser]):
    pass

"""OAuth endpoints.

These calls do not use the client's own access token: the token
exchange is unauthenticated and the advertiser listing takes the token
to inspect as an argument. A client built without a token is enough.
"""

from ..client import api_path, do_get, do_post
from ..models.authentication import (
    AccessToken,
    AccessTokenRequest,
    AuthorizedAdvertisersResponse,
)
from ..utils.params import QueryParams
from .base import BaseAPI


class AuthenticationAPI(BaseAPI):
    async def get_access_token(self, request: AccessTokenRequest) -> AccessToken:
        """Exchange an auth code for an access token and refresh token.

        :param request: App credentials and the auth code
        :type request: AccessTokenRequest
        :return: Token pair and the advertisers that granted access
        :rtype: AccessToken
        """
        return await do_post(
            self._client,
            api_path("oauth2/access_token"),
            request,
            AccessToken,
            authenticate=False,
        )

    async def get_advertisers(
        self, app_id: str, secret: str, access_token: str
    ) -> AuthorizedAdvertisersResponse:
        """List advertisers that granted ``access_token`` permission.

        :param app_id: Developer app ID
        :type app_id: str
        :param secret: Developer app secret
        :type secret: str
        :param access_token: Token whose advertisers are listed
        :type access_token: str
        :return: Authorized advertisers
        :rtype: AuthorizedAdvertisersResponse
        """
        params: QueryParams = {"app_id": app_id, "secret": secret}
        return await do_get(
            self._client,
            api_path("oauth2/advertiser/get"),
            params,
            AuthorizedAdvertisersResponse,
            access_token=access_token,
        )

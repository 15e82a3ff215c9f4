"""Base class shared by the resource API classes."""

from ..client import Client


class BaseAPI:
    """Holds the transport client a resource API issues its calls through.

    :param client: Shared transport client
    :type client: Client
    """

    def __init__(self, client: Client):
        self._client = client

    @property
    def client(self) -> Client:
        return self._client

"""Runs the standard introspection query against a GraphQL endpoint.

Handles HTTP communication and GraphQL error reporting.
"""

import logging
from typing import Any

import httpx
from graphql import get_introspection_query

from .auth import Auth, NoAuth

logger = logging.getLogger(__name__)

# Descriptions are not translated, so they are not requested
INTROSPECTION_QUERY = get_introspection_query(descriptions=False)


class GraphQLError(Exception):
    """Exception raised for GraphQL errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)


class IntrospectionClient:
    """Fetches an introspection document from an endpoint.

    Examples:
        client = IntrospectionClient(url, auth=BearerAuth(token))
        document = await client.fetch()
        await client.close()
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: GraphQL endpoint URL
            auth: Authentication handler (implements Auth protocol)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self._auth = auth if auth is not None else NoAuth()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            headers.update(self._auth.get_headers())

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "IntrospectionClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def fetch(self, query: str = INTROSPECTION_QUERY) -> dict[str, Any]:
        """Execute the introspection query.

        Returns:
            The whole response envelope (``{"data": {"__schema": ...}}``)

        Raises:
            GraphQLError: If the response contains errors
            httpx.HTTPError: On transport failures or non-2xx responses
        """
        client = await self._get_client()

        logger.debug("Introspecting %s", self.url)
        response = await client.post(self.url, json={"query": query})
        response.raise_for_status()

        result = response.json()

        if result.get("errors"):
            error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
            raise GraphQLError(f"GraphQL errors: {error_messages}", result["errors"])

        return {"data": result.get("data")}

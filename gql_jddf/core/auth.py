"""Authentication handlers for introspection requests.

Provides pluggable authentication via the Auth protocol.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers.

    Example:
        class TenantAuth:
            def __init__(self, token: str, tenant: str):
                self.token = token
                self.tenant = tenant

            def get_headers(self) -> dict[str, str]:
                return {"Authorization": f"Bearer {self.token}", "X-Tenant": self.tenant}
    """

    def get_headers(self) -> dict[str, str]:
        """Return headers to include in requests."""
        ...


class BearerAuth:
    """Bearer token authentication."""

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class HeaderAuth:
    """Arbitrary request headers, e.g. ``{"x-api-key": "..."}``."""

    def __init__(self, headers: dict[str, str]):
        self._headers = headers

    def get_headers(self) -> dict[str, str]:
        return self._headers.copy()


class CombinedAuth:
    """Merges the headers of several handlers; later handlers win."""

    def __init__(self, *handlers: Auth):
        self.handlers = handlers

    def get_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        for handler in self.handlers:
            headers.update(handler.get_headers())
        return headers


class NoAuth:
    """No authentication (for public endpoints or testing)."""

    def get_headers(self) -> dict[str, str]:
        return {}


def parse_header(text: str) -> tuple[str, str]:
    """Parse a ``NAME=VALUE`` or ``NAME: VALUE`` command-line header."""
    separators = [i for i in (text.find("="), text.find(":")) if i >= 0]
    if separators:
        index = min(separators)
        name, value = text[:index].strip(), text[index + 1:].strip()
        if name:
            return name, value
    raise ValueError(f"Invalid header {text!r}; expected NAME=VALUE")

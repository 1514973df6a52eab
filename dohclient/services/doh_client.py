"""DNS-over-HTTPS JSON API client."""
import logging
from typing import Optional

import requests

from dohclient.models import Provider, ResolveOptions, Response
from dohclient.services.endpoint_resolver import EndpointResolver
from dohclient.services.response_decoder import DecodeError, ResponseDecoder


logger = logging.getLogger(__name__)


class ResolveError(Exception):
    """Base class for errors raised by DoHClient.resolve."""
    pass


class TransportError(ResolveError):
    """Raised when the request could not be sent or no response arrived."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class RequestFailed(ResolveError):
    """Raised when the provider answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, url: str = ""):
        super().__init__(f"DoH request failed: HTTP {status_code}")
        self.status_code = status_code
        self.url = url


class DecodeFailed(ResolveError):
    """Raised when a 2xx response body is not a valid DoH JSON document."""

    def __init__(self, cause: DecodeError):
        super().__init__(f"Failed to decode DoH response: {cause}")
        self.cause = cause


class DoHClient:
    """Client resolving names through a DoH provider's JSON API.

    Each resolve() call is a single request with no retries and no caching.
    """

    ACCEPT_HEADER = "application/dns-json"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        provider: Optional[Provider] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize client.

        Args:
            provider: DoH provider (defaults to Google)
            session: HTTP session to send requests with; one is created
                and owned by the client when omitted
            timeout: Transport timeout in seconds
        """
        self.provider = provider or Provider.google()
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()

    @classmethod
    def from_config(cls, config, session: Optional[requests.Session] = None) -> "DoHClient":
        """Create client from application configuration."""
        return cls(provider=config.provider(), session=session, timeout=config.timeout)

    def resolve(self, name: str, options: Optional[ResolveOptions] = None) -> Response:
        """Resolve a domain name.

        Args:
            name: Domain name to resolve
            options: Record type and DNSSEC flags (defaults to an A query)

        Returns:
            Decoded Response

        Raises:
            TransportError: On connection, TLS or timeout failure
            RequestFailed: If the HTTP status is not 2xx
            DecodeFailed: If the body does not match the DoH JSON schema
        """
        options = options or ResolveOptions()

        try:
            url = EndpointResolver.query_url(self.provider, name, options)
            logger.debug(f"Resolving {name} ({options.type.label}) via {url}")
            response = self._session.get(
                url,
                headers={"Accept": self.ACCEPT_HEADER},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.warning(f"DoH request for {name} timed out after {self.timeout}s")
            raise TransportError(f"Request timeout: {e}", cause=e) from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"DoH request for {name} failed: {e}")
            raise TransportError(str(e), cause=e) from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"DoH provider {self.provider} returned HTTP {response.status_code} for {name}")
            raise RequestFailed(response.status_code, url)

        try:
            return ResponseDecoder.decode(response.content)
        except DecodeError as e:
            logger.warning(f"Invalid DoH response for {name}: {e}")
            raise DecodeFailed(e) from e

    def close(self) -> None:
        """Close the HTTP session if the client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "DoHClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

"""HTTP GET transport."""

from typing import Callable, Optional

import requests

from openf1_client.conf.settings import Settings, settings as default_settings
from openf1_client.exceptions import TransportError
from openf1_client.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Anything that turns a request URL into a response body
Fetcher = Callable[[str], bytes]


class HTTPFetcher:
    """Buffered GET over a requests session.

    The fetcher keeps no per-request state of its own. requests does not
    promise that a Session is thread-safe, so threads that fetch in parallel
    should each build their own fetcher.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize fetcher.

        Args:
            settings: Client settings (default: global settings)
            session: Preconfigured session (default: a new one)
        """
        self.settings = settings or default_settings
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": self.settings.user_agent,
                "Accept": "application/json",
            }
        )

    def __call__(self, url: str) -> bytes:
        return self.fetch(url)

    def fetch(self, url: str) -> bytes:
        """GET a URL and return the full body.

        The status code is not interpreted unless settings.raise_for_status
        is set; error pages are returned like any other body.

        Args:
            url: Fully composed request URL

        Returns:
            Response body bytes

        Raises:
            TransportError: On connection failure or timeout, or a non-2xx
                status when settings.raise_for_status is set
        """
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.settings.timeout)
        except requests.Timeout as e:
            raise TransportError(
                f"Timed out after {self.settings.timeout}s: {url}", url=url
            ) from e
        except requests.RequestException as e:
            raise TransportError(f"Request failed for {url}: {e}", url=url) from e

        if not 200 <= response.status_code < 300:
            if self.settings.raise_for_status:
                raise TransportError(
                    f"HTTP {response.status_code} for {url}",
                    url=url,
                    status_code=response.status_code,
                )
            logger.warning(f"HTTP {response.status_code} for {url}, decoding body anyway")

        return response.content

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def __enter__(self) -> "HTTPFetcher":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

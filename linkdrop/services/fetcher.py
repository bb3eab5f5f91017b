import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from linkdrop.core.models import FetchResult
from .exceptions import NetworkFetchError, HTTPFetchError, DecodeFetchError

# Import settings
from linkdrop.core.config import settings

logger = logging.getLogger(__name__)


class MetadataFetcherInterface(ABC):
    """Interface for fetching web content following the Dependency Inversion Principle"""

    @abstractmethod
    def fetch(self, url: str) -> FetchResult:
        """
        Fetch a document, following redirects.

        Args:
            url: The URL to retrieve

        Returns:
            The final URL after redirects together with the body text

        Raises:
            FetchError: One of its subclasses when the request fails
        """
        pass


class MetadataFetcher(MetadataFetcherInterface):
    """
    Fetches page content with a single blocking GET.
    Runs on the calling worker thread; there are no retries.
    """

    def __init__(
        self,
        timeout: float = None,
        user_agent: str = None,
        follow_redirects: bool = None,
        raise_for_status: bool = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.timeout = settings.fetch_timeout if timeout is None else timeout
        self.user_agent = user_agent or settings.fetch_user_agent
        self.follow_redirects = settings.fetch_follow_redirects if follow_redirects is None else follow_redirects
        self.raise_for_status = settings.fetch_raise_for_status if raise_for_status is None else raise_for_status
        self.transport = transport

    def fetch(self, url: str) -> FetchResult:
        """Fetch the document at url and report where the redirect chain ended"""
        logger.info(f"Fetching content from URL: {url}")

        headers = {
            "User-Agent": self.user_agent
        }

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                transport=self.transport
            ) as client:
                res = client.get(url, headers=headers)
                if self.raise_for_status:
                    res.raise_for_status()

                final_url = str(res.url)
                try:
                    body = res.text
                except (UnicodeDecodeError, LookupError) as e:
                    logger.error(f"Could not decode body from URL {final_url}: {str(e)}")
                    raise DecodeFetchError(f"Could not decode response body: {str(e)}")

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error occurred while fetching URL {url}: {e}")
            raise HTTPFetchError(status_code=e.response.status_code, message=f"HTTP error occurred: {e}")
        except httpx.DecodingError as e:
            logger.error(f"Decoding error occurred while fetching URL {url}: {str(e)}")
            raise DecodeFetchError(f"Decoding error occurred: {str(e)}")
        except httpx.RequestError as e:
            logger.error(f"Request error occurred while fetching URL {url}: {str(e)}")
            raise NetworkFetchError(f"Request error occurred: {str(e)}")
        except httpx.InvalidURL as e:
            logger.error(f"Invalid URL {url}: {str(e)}")
            raise NetworkFetchError(f"Invalid URL: {str(e)}")

        if final_url != url:
            logger.debug(f"Redirected from {url} to {final_url}")
        logger.info(f"Successfully fetched content from URL: {final_url}")
        return FetchResult(final_url=final_url, body=body)

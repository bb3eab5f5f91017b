import logging
from pathlib import Path
from typing import Optional, Union

from .shortcut_parser import ShortcutParserInterface
from .fetcher import MetadataFetcherInterface
from .metadata_extractor import MetadataExtractorInterface
from .exceptions import ShortcutParseError, FetchError
from linkdrop.core.models import LinkMetadata, ShortcutFormat

logger = logging.getLogger(__name__)


class ResolutionPipeline:
    """
    Turns a dropped shortcut file into LinkMetadata.

    Outcomes:
        * unrecognized extension or unparseable shortcut: None, nothing reported
        * fetch and extraction succeed: full result keyed by the final URL
        * fetch or extraction fails: degraded result holding only the parsed URL
    """

    def __init__(
        self,
        shortcut_parser: ShortcutParserInterface,
        metadata_fetcher: MetadataFetcherInterface,
        metadata_extractor: MetadataExtractorInterface
    ):
        self.shortcut_parser = shortcut_parser
        self.metadata_fetcher = metadata_fetcher
        self.metadata_extractor = metadata_extractor

    def resolve(self, path: Union[str, Path]) -> Optional[LinkMetadata]:
        """
        Resolve a dropped file path.

        Args:
            path: The dropped file

        Returns:
            LinkMetadata once a URL was read from the shortcut, otherwise None
        """
        fmt = ShortcutFormat.detect(path)
        if fmt is None:
            logger.debug(f"Ignoring drop of non-shortcut file: {path}")
            return None

        try:
            url = self.shortcut_parser.parse(path, fmt)
        except ShortcutParseError as e:
            logger.warning(f"Skipping shortcut {path} [{e.error_code}]: {e.message}")
            return None

        logger.info(f"Resolved shortcut {path} to URL: {url}")

        try:
            fetched = self.metadata_fetcher.fetch(url)
            fields = self.metadata_extractor.extract(fetched.body, fetched.final_url)
        except FetchError as e:
            logger.warning(f"Returning URL-only metadata for {url} [{e.error_code}]: {e.message}")
            return LinkMetadata(url=url)
        except Exception as e:
            logger.error(f"Unexpected error while resolving {url}: {str(e)}")
            return LinkMetadata(url=url)

        return LinkMetadata.from_fields(fetched.final_url, fields)

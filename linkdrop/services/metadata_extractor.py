import logging
from abc import ABC, abstractmethod

from .html_parser import HTMLParser
from linkdrop.core.models import LinkMetadataFields


logger = logging.getLogger(__name__)


class MetadataExtractorInterface(ABC):
    """Interface for metadata extraction following the Dependency Inversion Principle"""

    @abstractmethod
    def extract(self, html: str, url: str) -> LinkMetadataFields:
        pass


class MetadataExtractor(MetadataExtractorInterface):
    """
    Extracts link preview fields from HTML using the <title> element and Open Graph tags
    """

    def extract(self, html: str, url: str) -> LinkMetadataFields:
        """Extract title, description, image and favicon; missing fields are None"""
        logger.info(f"Extracting metadata from HTML for URL: {url}")

        try:
            html_parser = HTMLParser(html, url)

            fields = LinkMetadataFields(
                title=html_parser.get_title(),
                description=html_parser.get_description(),
                image=html_parser.get_image(),
                favicon=html_parser.get_favicon()
            )

            logger.info(f"Successfully extracted metadata for URL: {url}")
            return fields
        except Exception as e:
            logger.error(f"Failed to extract metadata for URL {url}: {str(e)}")
            return LinkMetadataFields()

from enum import Enum
from pathlib import Path
from typing import Optional, Dict, Any, Union
from dataclasses import dataclass


class ShortcutFormat(str, Enum):
    """Internet-shortcut file formats recognized by their extension"""
    URL_FILE = "url"
    WEBLOC_FILE = "webloc"

    @classmethod
    def detect(cls, path: Union[str, Path]) -> Optional["ShortcutFormat"]:
        """Return the format for a path's extension (case-insensitive), or None if unrecognized"""
        extension = Path(path).suffix.lstrip(".").lower()
        for fmt in cls:
            if fmt.value == extension:
                return fmt
        return None


@dataclass(frozen=True)
class FetchResult:
    """Final URL after redirects and the decoded response body"""
    final_url: str
    body: str


@dataclass(frozen=True)
class LinkMetadataFields:
    """Optional fields scraped from a fetched document"""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    favicon: Optional[str] = None


@dataclass(frozen=True)
class LinkMetadata:
    """
    Represents the metadata resolved for a dropped internet shortcut
    """
    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    favicon: Optional[str] = None

    def __post_init__(self):
        if not self.url:
            raise ValueError("LinkMetadata requires a non-empty url")

    @classmethod
    def from_fields(cls, url: str, fields: LinkMetadataFields) -> "LinkMetadata":
        return cls(
            url=url,
            title=fields.title,
            description=fields.description,
            image=fields.image,
            favicon=fields.favicon
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the metadata to a dictionary representation"""
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "image": self.image,
            "favicon": self.favicon
        }

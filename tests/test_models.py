import dataclasses
import pytest
from linkdrop.core.models import LinkMetadata, LinkMetadataFields


class TestLinkMetadata:
    """Unit tests for LinkMetadata"""

    def test_to_dict_encodes_absent_fields_as_none(self):
        """Test serialization of a URL-only result."""
        metadata = LinkMetadata(url="https://example.com/")

        assert metadata.to_dict() == {
            "url": "https://example.com/",
            "title": None,
            "description": None,
            "image": None,
            "favicon": None
        }

    def test_from_fields(self):
        """Test combining a URL with extracted fields."""
        fields = LinkMetadataFields(title="T", favicon="https://example.com/favicon.ico")

        metadata = LinkMetadata.from_fields("https://example.com/", fields)

        assert metadata.title == "T"
        assert metadata.description is None
        assert metadata.favicon == "https://example.com/favicon.ico"

    def test_empty_url_rejected(self):
        """Test that a LinkMetadata always carries a URL."""
        with pytest.raises(ValueError):
            LinkMetadata(url="")

    def test_is_immutable(self):
        """Test that metadata cannot be changed after construction."""
        metadata = LinkMetadata(url="https://example.com/")
        with pytest.raises(dataclasses.FrozenInstanceError):
            metadata.title = "changed"

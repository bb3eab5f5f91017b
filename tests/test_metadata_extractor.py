import pytest
from unittest.mock import patch
from linkdrop.services.metadata_extractor import MetadataExtractor
from linkdrop.core.models import LinkMetadataFields


class TestMetadataExtractor:
    """Unit tests for MetadataExtractor"""

    def setup_method(self):
        """Set up test fixtures before each test method."""
        self.extractor = MetadataExtractor()

    def test_extract_all_fields(self):
        """Test extracting every field from a complete page."""
        # Arrange
        html = """
        <html>
        <head>
            <title>Example</title>
            <meta property="og:title" content="Other">
            <meta name="description" content="An example page">
            <meta property="og:image" content="/images/preview.png">
            <link rel="shortcut icon" href="/favicon.ico">
        </head>
        <body><h1>Hello</h1></body>
        </html>
        """

        # Act
        result = self.extractor.extract(html, "https://example.com/dir/page")

        # Assert
        assert result == LinkMetadataFields(
            title="Example",
            description="An example page",
            image="/images/preview.png",
            favicon="https://example.com/favicon.ico"
        )

    def test_extract_fields_are_independent(self):
        """Test that a missing title does not block the other fields."""
        # Arrange
        html = """
        <html>
        <head>
            <meta property="og:description" content="Only OG description">
            <link rel="icon" href="https://static.example.com/icon.svg">
        </head>
        </html>
        """

        # Act
        result = self.extractor.extract(html, "https://example.com/")

        # Assert
        assert result.title is None
        assert result.description == "Only OG description"
        assert result.image is None
        assert result.favicon == "https://static.example.com/icon.svg"

    def test_extract_non_html_body(self):
        """Test that plain text input yields an empty field set."""
        result = self.extractor.extract("just some text, not markup", "https://example.com/")
        assert result == LinkMetadataFields()

    def test_extract_never_raises(self):
        """Test that parser failures are converted to empty fields."""
        with patch("linkdrop.services.metadata_extractor.HTMLParser", side_effect=RuntimeError("boom")):
            result = self.extractor.extract("<html></html>", "https://example.com/")
        assert result == LinkMetadataFields()

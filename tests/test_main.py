import json
import pytest
from unittest.mock import patch
from linkdrop import main as cli
from linkdrop.core.models import FetchResult
from linkdrop.services.container import ServiceContainer
from linkdrop.services.fetcher import MetadataFetcher, MetadataFetcherInterface
from linkdrop.services.resolution_pipeline import ResolutionPipeline
from linkdrop.services.exceptions import NetworkFetchError


class TestServiceContainer:
    """Unit tests for ServiceContainer"""

    def test_get_service(self):
        container = ServiceContainer()
        assert isinstance(container.get_service(MetadataFetcherInterface), MetadataFetcher)
        assert isinstance(container.get_pipeline(), ResolutionPipeline)

    def test_get_unknown_service(self):
        """Test that an unregistered interface raises ValueError."""
        container = ServiceContainer()
        with pytest.raises(ValueError) as exc_info:
            container.get_service(dict)
        assert "dict" in str(exc_info.value)


class TestMain:
    """Tests for the console entry point"""

    @pytest.fixture(autouse=True)
    def no_logging_setup(self):
        with patch.object(cli, "setup_logging"):
            yield

    def test_main_prints_one_json_line_per_shortcut(self, tmp_path, capsys):
        """Test that dropped shortcuts are printed as link-dropped notifications."""
        # Arrange
        shortcut = tmp_path / "example.url"
        shortcut.write_text("[InternetShortcut]\nURL=https://example.com/page\n", encoding="utf-8")
        ignored = tmp_path / "notes.txt"
        ignored.write_text("URL=https://example.com/ignored\n", encoding="utf-8")

        # Act
        with patch.object(
            MetadataFetcher, "fetch",
            return_value=FetchResult(final_url="https://example.com/page", body="<title>Example</title>")
        ):
            exit_code = cli.main([str(shortcut), str(ignored)])

        # Assert
        assert exit_code == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0]) == {
            "event": "link-dropped",
            "payload": {
                "url": "https://example.com/page",
                "title": "Example",
                "description": None,
                "image": None,
                "favicon": None
            }
        }

    def test_main_degraded_output(self, tmp_path, capsys):
        """Test that an unreachable link still prints its URL."""
        shortcut = tmp_path / "offline.webloc"
        shortcut.write_text("<plist><string>https://offline.example.com/x</string></plist>", encoding="utf-8")

        with patch.object(MetadataFetcher, "fetch", side_effect=NetworkFetchError()):
            cli.main([str(shortcut)])

        payload = json.loads(capsys.readouterr().out)["payload"]
        assert payload["url"] == "https://offline.example.com/x"
        assert payload["title"] is None

    def test_main_without_paths(self, capsys):
        assert cli.main([]) == 0
        assert capsys.readouterr().out == ""

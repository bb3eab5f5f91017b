import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from linkdrop.core.models import ShortcutFormat
from .exceptions import UnreadableShortcutError, NoUrlFieldError


logger = logging.getLogger(__name__)

URL_FIELD_PREFIX = "URL="
WEBLOC_OPEN_TAG = "<string>"
WEBLOC_CLOSE_TAG = "</string>"


class ShortcutParserInterface(ABC):
    """Interface for shortcut parsing following the Dependency Inversion Principle"""

    @abstractmethod
    def parse(self, path: Union[str, Path], fmt: ShortcutFormat) -> str:
        """
        Extract the target URL from a shortcut file.

        Args:
            path: Location of the shortcut file
            fmt: The detected shortcut format

        Returns:
            The URL stored in the shortcut

        Raises:
            UnreadableShortcutError: If the file cannot be read as text
            NoUrlFieldError: If the file holds no URL
        """
        pass


class ShortcutParser(ShortcutParserInterface):
    """
    Reads .url and .webloc internet shortcuts.
    Parsing is a lenient first-match scan, not a validating INI or plist parser.
    """

    def parse(self, path: Union[str, Path], fmt: ShortcutFormat) -> str:
        logger.debug(f"Parsing {fmt.value} shortcut: {path}")

        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read shortcut file {path}: {str(e)}")
            raise UnreadableShortcutError(str(path), str(e))

        return self.parse_content(content, fmt)

    def parse_content(self, content: str, fmt: ShortcutFormat) -> str:
        """Extract the URL from shortcut text already loaded into memory"""
        if fmt is ShortcutFormat.URL_FILE:
            url = self._parse_url_file(content)
        elif fmt is ShortcutFormat.WEBLOC_FILE:
            url = self._parse_webloc_file(content)
        else:
            raise NoUrlFieldError(f"Unsupported shortcut format: {fmt}")

        if not url:
            raise NoUrlFieldError("Shortcut URL field is empty")
        return url

    @staticmethod
    def _parse_url_file(content: str) -> str:
        for line in content.splitlines():
            if line.startswith(URL_FIELD_PREFIX):
                return line[len(URL_FIELD_PREFIX):].strip()
        raise NoUrlFieldError("No 'URL=' line found in shortcut")

    @staticmethod
    def _parse_webloc_file(content: str) -> str:
        start = content.find(WEBLOC_OPEN_TAG)
        if start == -1:
            raise NoUrlFieldError("No <string> element found in webloc")
        start += len(WEBLOC_OPEN_TAG)

        end = content.find(WEBLOC_CLOSE_TAG, start)
        if end == -1:
            raise NoUrlFieldError("Unterminated <string> element in webloc")
        return content[start:end].strip()

"""Custom exception hierarchy for the service layer"""

class ServiceError(Exception):
    """Base exception for all service-related errors"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ShortcutParseError(ServiceError):
    """Raised when a URL cannot be read out of a shortcut file"""
    def __init__(self, message: str = "Failed to parse shortcut file", error_code: str = "PARSE_ERROR"):
        super().__init__(message, error_code)


class UnreadableShortcutError(ShortcutParseError):
    """Raised when the shortcut file cannot be read as UTF-8 text"""
    def __init__(self, path: str, reason: str = None):
        message = f"Shortcut file '{path}' could not be read"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, "UNREADABLE")
        self.path = path


class NoUrlFieldError(ShortcutParseError):
    """Raised when the shortcut file holds no URL field"""
    def __init__(self, message: str = "Shortcut file contains no URL field"):
        super().__init__(message, "NO_URL_FIELD")


class FetchError(ServiceError):
    """Raised when fetching content from URL fails"""
    def __init__(self, message: str = "Failed to fetch content from URL", error_code: str = "FETCH_ERROR"):
        super().__init__(message, error_code)


class NetworkFetchError(FetchError):
    """Raised on connection, DNS, TLS or timeout failures"""
    def __init__(self, message: str = "Network error while fetching URL"):
        super().__init__(message, "NETWORK_ERROR")


class HTTPFetchError(FetchError):
    """Raised when the server answers with a non-success status"""
    def __init__(self, status_code: int, message: str = None):
        if message is None:
            message = f"HTTP request failed with status code {status_code}"
        super().__init__(message, "HTTP_ERROR")
        self.status_code = status_code


class DecodeFetchError(FetchError):
    """Raised when the response body cannot be decoded as text"""
    def __init__(self, message: str = "Response body could not be decoded as text"):
        super().__init__(message, "DECODE_ERROR")

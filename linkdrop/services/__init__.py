from .exceptions import (
    ServiceError,
    ShortcutParseError,
    UnreadableShortcutError,
    NoUrlFieldError,
    FetchError,
    NetworkFetchError,
    HTTPFetchError,
    DecodeFetchError,
)
from .shortcut_parser import ShortcutParser, ShortcutParserInterface
from .fetcher import MetadataFetcher, MetadataFetcherInterface
from .metadata_extractor import MetadataExtractor, MetadataExtractorInterface
from .resolution_pipeline import ResolutionPipeline
from .notifier import NotificationChannelInterface, CallbackNotificationChannel, StreamNotificationChannel
from .drop_handler import DropHandler
from .container import ServiceContainer

__all__ = [
    "ServiceError",
    "ShortcutParseError",
    "UnreadableShortcutError",
    "NoUrlFieldError",
    "FetchError",
    "NetworkFetchError",
    "HTTPFetchError",
    "DecodeFetchError",
    "ShortcutParser",
    "ShortcutParserInterface",
    "MetadataFetcher",
    "MetadataFetcherInterface",
    "MetadataExtractor",
    "MetadataExtractorInterface",
    "ResolutionPipeline",
    "NotificationChannelInterface",
    "CallbackNotificationChannel",
    "StreamNotificationChannel",
    "DropHandler",
    "ServiceContainer",
]

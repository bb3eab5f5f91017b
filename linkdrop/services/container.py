from typing import Dict, Type, TypeVar
from .shortcut_parser import ShortcutParser, ShortcutParserInterface
from .fetcher import MetadataFetcher, MetadataFetcherInterface
from .metadata_extractor import MetadataExtractor, MetadataExtractorInterface
from .resolution_pipeline import ResolutionPipeline
from .notifier import NotificationChannelInterface
from .drop_handler import DropHandler

T = TypeVar('T')

class ServiceContainer:
    """Container for managing service dependencies with dependency injection"""

    def __init__(self):
        self._services: Dict[Type, object] = {}

        # Register services in dependency order
        self._register_services()

    def _register_services(self) -> None:
        """Register all services with proper dependency injection"""
        self._services[ShortcutParserInterface] = ShortcutParser()
        self._services[MetadataFetcherInterface] = MetadataFetcher()
        self._services[MetadataExtractorInterface] = MetadataExtractor()

        # Main service that depends on others
        self._services[ResolutionPipeline] = ResolutionPipeline(
            self._services[ShortcutParserInterface],
            self._services[MetadataFetcherInterface],
            self._services[MetadataExtractorInterface]
        )

    def get_pipeline(self) -> ResolutionPipeline:
        """Get the resolution pipeline instance"""
        return self._services[ResolutionPipeline]  # type: ignore

    def create_drop_handler(self, channel: NotificationChannelInterface, **kwargs) -> DropHandler:
        """Build a drop handler that reports through the given channel"""
        return DropHandler(self.get_pipeline(), channel, **kwargs)

    def get_service(self, interface: Type[T]) -> T:
        """Generic method to retrieve a service by its interface"""
        service = self._services.get(interface)
        if service is None:
            raise ValueError(f"Service for interface {interface.__name__} not found")
        return service  # type: ignore

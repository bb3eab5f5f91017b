import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Union

from .notifier import NotificationChannelInterface
from .resolution_pipeline import ResolutionPipeline

# Import settings
from linkdrop.core.config import settings

logger = logging.getLogger(__name__)


class DropHandler:
    """
    Boundary between host file-drop events and the resolution pipeline.

    Every drop is submitted to a thread pool and the call returns at once.
    Results only leave through the notification channel; failures never reach
    the caller. Submitted runs cannot be cancelled.
    """

    def __init__(
        self,
        pipeline: ResolutionPipeline,
        channel: NotificationChannelInterface,
        event_name: str = None,
        max_workers: Optional[int] = None
    ):
        self.pipeline = pipeline
        self.channel = channel
        self.event_name = event_name or settings.drop_event_name
        if max_workers is None:
            max_workers = settings.drop_max_workers
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="linkdrop")

    def on_file_dropped(self, path: Union[str, Path]) -> None:
        """Dispatch resolution of one dropped file and return immediately"""
        logger.debug(f"File dropped: {path}")
        try:
            self.executor.submit(self._resolve_and_notify, path)
        except RuntimeError as e:
            logger.warning(f"Ignoring drop of {path} after shutdown: {str(e)}")

    def on_files_dropped(self, paths: Iterable[Union[str, Path]]) -> None:
        """Dispatch one independent resolution per path of a drag-and-drop gesture"""
        for path in paths:
            self.on_file_dropped(path)

    def _resolve_and_notify(self, path: Union[str, Path]) -> None:
        try:
            metadata = self.pipeline.resolve(path)
            if metadata is None:
                return
            self.channel.emit_all(self.event_name, metadata.to_dict())
            logger.info(f"Emitted '{self.event_name}' for URL: {metadata.url}")
        except Exception:
            logger.exception(f"Failed to handle dropped file {path}")

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting drops; with wait=True block until queued runs finish"""
        self.executor.shutdown(wait=wait)

    def __enter__(self) -> "DropHandler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown(wait=True)

import json
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, TextIO

logger = logging.getLogger(__name__)


class NotificationChannelInterface(ABC):
    """Outbound channel that broadcasts named events to every host window"""

    @abstractmethod
    def emit_all(self, event: str, payload: Dict[str, Any]) -> None:
        """
        Broadcast an event.

        Args:
            event: The event name, e.g. "link-dropped"
            payload: JSON-serializable event body
        """
        pass


class CallbackNotificationChannel(NotificationChannelInterface):
    """Hands every notification to a host-supplied callable"""

    def __init__(self, callback: Callable[[str, Dict[str, Any]], None]):
        self.callback = callback

    def emit_all(self, event: str, payload: Dict[str, Any]) -> None:
        logger.debug(f"Emitting '{event}' for {payload.get('url')}")
        self.callback(event, payload)


class StreamNotificationChannel(NotificationChannelInterface):
    """Writes notifications as JSON lines to a text stream"""

    def __init__(self, stream: TextIO):
        self.stream = stream
        # Workers emit concurrently; keep each line whole
        self._lock = threading.Lock()

    def emit_all(self, event: str, payload: Dict[str, Any]) -> None:
        line = json.dumps({"event": event, "payload": payload}, ensure_ascii=False)
        with self._lock:
            self.stream.write(line + "\n")
            self.stream.flush()

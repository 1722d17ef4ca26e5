"""
File watcher for the gesture configuration file.

Watches the configuration directory with watchdog and invokes a callback for
every modification, creation or move onto the configuration file. Events are
not debounced: each one triggers a full reload on the observer thread.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Union

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..errors import WatchUnavailable

logger = logging.getLogger(__name__)

OBSERVER_JOIN_TIMEOUT = 5.0


def _event_path(path: Union[str, bytes]) -> str:
    return os.path.abspath(os.fsdecode(path))


class ConfigFileHandler(FileSystemEventHandler):
    """Forwards events for exactly one file to a callback."""

    def __init__(self, config_file: Path, callback: Callable[[], object]):
        """
        Initialize file handler.

        Args:
            config_file: Absolute path of the watched configuration file
            callback: Function to call on each change, run synchronously
        """
        super().__init__()
        self.config_file = str(config_file)
        self.callback = callback

    def _should_trigger(self, event: FileSystemEvent) -> bool:
        """Check that the event targets the configuration file itself."""
        if event.is_directory:
            return False
        event_path = getattr(event, "dest_path", None) or event.src_path
        return _event_path(event_path) == self.config_file

    def on_modified(self, event: FileSystemEvent) -> None:
        if self._should_trigger(event):
            self._dispatch_change()

    def on_created(self, event: FileSystemEvent) -> None:
        if self._should_trigger(event):
            self._dispatch_change()

    def on_moved(self, event: FileSystemEvent) -> None:
        # Editors that save atomically write a temp file and rename it over the config
        if self._should_trigger(event):
            self._dispatch_change()

    def _dispatch_change(self) -> None:
        logger.info("Your configuration file changed, reloading your settings")
        try:
            self.callback()
        except Exception as e:
            logger.error(f"Error handling config file change: {e}")


class ConfigWatcher:
    """Watches the configuration file and triggers reloads."""

    def __init__(self, config_file: Union[str, Path], on_change: Callable[[], object]):
        """
        Initialize configuration watcher.

        Args:
            config_file: Resolved configuration file path
            on_change: Function to call on file changes
        """
        self.config_file = Path(os.path.abspath(config_file))
        self.on_change = on_change

        self.observer: Optional[Observer] = None
        self.handler: Optional[ConfigFileHandler] = None
        self.running = False
        self.last_error: Optional[WatchUnavailable] = None

    def start(self) -> bool:
        """
        Start watching the configuration file.

        A watch backend that cannot be initialized or a path that cannot be
        registered only disables hot-reload.

        Returns:
            True if the watcher is running, False if hot-reload is disabled
        """
        if self.running:
            logger.warning("Config watcher already running")
            return True

        self.handler = ConfigFileHandler(self.config_file, self.on_change)

        try:
            observer = Observer()
            observer.schedule(self.handler, str(self.config_file.parent), recursive=False)
            observer.start()
        except OSError as e:
            self.last_error = WatchUnavailable(self.config_file, str(e))
            logger.warning(self.last_error.user_message())
            self.observer = None
            return False

        self.observer = observer
        self.running = True
        self.last_error = None
        logger.info(f"Started watching {self.config_file} for modifications")
        return True

    def stop(self) -> None:
        """Stop the observer thread and wait for it to exit."""
        if not self.running:
            return

        if self.observer:
            self.observer.stop()
            self.observer.join(timeout=OBSERVER_JOIN_TIMEOUT)

        self.observer = None
        self.running = False
        logger.info(f"Stopped watching {self.config_file}")

    def is_running(self) -> bool:
        return self.running

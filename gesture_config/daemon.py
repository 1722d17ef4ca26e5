"""
Gesture Configuration Daemon

Loads the gesture configuration into an in-memory store and keeps it
hot-reloaded until SIGINT/SIGTERM.
"""
# Module can be run with: python -m gesture_config

import logging
import signal
import sys
import threading
from typing import Optional

from .config.loader import ConfigLoader
from .errors import ConfigError
from .paths import ConfigPaths
from .store import InMemoryGestureStore

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT
    )


class GestureConfigDaemon:
    """Owns the store, the loader and the shutdown signal."""

    def __init__(self, paths: Optional[ConfigPaths] = None, store: Optional[InMemoryGestureStore] = None):
        """
        Initialize gesture configuration daemon.

        Args:
            paths: Configuration file layout (defaults to the standard one)
            store: Store to populate (defaults to a fresh in-memory store)
        """
        self.paths = paths or ConfigPaths.from_env()
        self.store = store if store is not None else InMemoryGestureStore()
        self.loader: Optional[ConfigLoader] = None
        self._shutdown = threading.Event()

    def start(self) -> None:
        """
        Bootstrap and load the configuration, then start hot-reload.

        Raises:
            ConfigError: On fatal startup errors
        """
        logger.info("Starting gesture configuration daemon")

        self.loader = ConfigLoader(self.store, self.paths)
        self.loader.load()

        if not self.loader.hot_reload_enabled:
            logger.warning("Hot-reload disabled, serving the configuration loaded at startup")

        logger.info("Daemon started successfully")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until stop() is called. Returns True once stopped."""
        return self._shutdown.wait(timeout)

    def stop(self) -> None:
        """Stop the config watcher and release waiters."""
        logger.info("Stopping daemon...")
        if self.loader:
            self.loader.stop()
        self._shutdown.set()
        logger.info("Daemon stopped")

    def install_signal_handlers(self) -> None:
        def signal_handler(signum, frame):
            logger.info("Received shutdown signal")
            self.stop()

        for sig in (signal.SIGINT, signal.SIGTERM):
            signal.signal(sig, signal_handler)


def run(paths: Optional[ConfigPaths] = None) -> int:
    """Run the daemon until a shutdown signal arrives. Returns an exit status."""
    daemon = GestureConfigDaemon(paths)
    daemon.install_signal_handlers()

    try:
        daemon.start()
        daemon.wait()
    except ConfigError as e:
        logger.error(f"Fatal error: {e.user_message()}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        daemon.stop()

    return 0


def main() -> None:
    """Main entry point."""
    configure_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()

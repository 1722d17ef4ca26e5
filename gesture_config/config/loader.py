"""
Gesture configuration loader.

Bootstraps the user configuration on construction, loads it into the store,
and keeps it in sync through the config watcher. A reload that fails to parse
leaves the previously loaded configuration in place.
"""

import logging
import time
from pathlib import Path
from typing import List, Optional

from ..errors import DocumentInvalid
from ..models import GestureConfigRecord, ReloadResult
from ..paths import ConfigPaths
from ..state import LoaderState
from ..store import GestureStore
from .bootstrap import ensure_user_config
from .file_watcher import ConfigWatcher
from .mapper import add_records, map_records
from .parser import parse_document

logger = logging.getLogger(__name__)


def read_records(config_file: Path) -> List[GestureConfigRecord]:
    """Parse and map a configuration file without touching any store."""
    return map_records(parse_document(config_file))


class ConfigLoader:
    """Loads gesture configuration into a store and hot-reloads it."""

    def __init__(self, store: GestureStore, paths: Optional[ConfigPaths] = None):
        """
        Initialize configuration loader.

        Args:
            store: Store receiving gesture records
            paths: Configuration file layout (defaults to the standard one)

        Raises:
            HomeUnresolvable: If the home directory cannot be determined
            DefaultConfigMissing: If no user config exists and the default is not installed
            BootstrapFailed: If the default could not be copied
        """
        self.store = store
        self.paths = paths or ConfigPaths.from_env()
        self.state = LoaderState()
        self.watcher: Optional[ConfigWatcher] = None
        self.config_file: Path = ensure_user_config(self.paths)

    def load(self) -> ReloadResult:
        """
        Load the configuration once and start watching it.

        Returns:
            Result of the initial load

        Raises:
            DocumentInvalid: If the initial configuration cannot be parsed
        """
        self.config_file = self.paths.user_config_file
        self.state.config_file = str(self.config_file)

        start = time.perf_counter()
        records = read_records(self.config_file)
        self._replace_records(records)
        result = ReloadResult(
            success=True,
            record_count=len(records),
            duration_ms=_elapsed_ms(start)
        )
        self.state.record_load(result)
        logger.info(f"Mapped {result.record_count} gesture records from {self.config_file}")

        # A repeated load replaces the watcher rather than leaking the old observer
        self.stop()
        self.watcher = ConfigWatcher(self.config_file, self.reload)
        self.state.hot_reload_active = self.watcher.start()
        return result

    def reload(self) -> ReloadResult:
        """
        Re-read the configuration and replace the store contents.

        Parse errors are logged and reported in the result; the store keeps
        the previous records in that case.
        """
        start = time.perf_counter()
        try:
            records = read_records(self.config_file)
        except DocumentInvalid as e:
            logger.error(f"Configuration reload failed, keeping previous settings: {e.message}")
            result = ReloadResult(
                success=False,
                error_code=e.code,
                message=e.message,
                duration_ms=_elapsed_ms(start)
            )
            self.state.record_reload_attempt(result)
            return result

        self._replace_records(records)
        result = ReloadResult(
            success=True,
            record_count=len(records),
            duration_ms=_elapsed_ms(start)
        )
        self.state.record_reload_attempt(result)
        logger.info(f"Reloaded {result.record_count} mapped gesture records")
        return result

    def _replace_records(self, records: List[GestureConfigRecord]) -> None:
        with self.store.transaction():
            self.store.clear()
            add_records(records, self.store)

    @property
    def hot_reload_enabled(self) -> bool:
        return self.watcher is not None and self.watcher.is_running()

    def stop(self) -> None:
        """Stop the config watcher. Safe to call more than once."""
        if self.watcher:
            self.watcher.stop()
        self.state.hot_reload_active = False


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)

"""
Gesture record store.

The store holds the active set of gesture records queried by action
dispatch. Loading code only ever adds records and clears the store; a
reload wraps clear+repopulate in ``transaction()``.

InMemoryGestureStore takes the same lock for reads, so readers block while a
reload is in progress and never see a half-populated store. Stores that
implement ``transaction()`` as a no-op expose the transient empty state.
"""

import logging
import threading
from contextlib import contextmanager
from typing import ContextManager, Dict, Iterator, List, Optional, Protocol, Tuple

from .models import GestureConfigRecord

logger = logging.getLogger(__name__)

GestureKey = Tuple[str, str, str, str]


class GestureStore(Protocol):
    """Contract consumed by the configuration loader."""

    def add_record(
        self,
        application: str,
        gesture_type: str,
        fingers: str,
        direction: str,
        action_type: str,
        settings: Dict[str, str],
    ) -> None:
        ...

    def clear(self) -> None:
        ...

    def transaction(self) -> ContextManager[None]:
        ...


class InMemoryGestureStore:
    """Thread-safe in-memory store keyed by (application, type, fingers, direction)."""

    def __init__(self) -> None:
        self._records: Dict[GestureKey, GestureConfigRecord] = {}
        self._lock = threading.RLock()

    def add_record(
        self,
        application: str,
        gesture_type: str,
        fingers: str,
        direction: str,
        action_type: str,
        settings: Dict[str, str],
    ) -> None:
        """Save a gesture record. A record with the same key replaces the old one."""
        record = GestureConfigRecord(
            application=application,
            gesture_type=gesture_type,
            fingers=fingers,
            direction=direction,
            action_type=action_type,
            settings=dict(settings),
        )
        key = (application, gesture_type, fingers, direction)
        with self._lock:
            if key in self._records:
                logger.debug(f"Replacing gesture config {key}")
            self._records[key] = record

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the store lock; reads block until the block exits."""
        with self._lock:
            yield

    def get_gesture_config(
        self,
        application: str,
        gesture_type: str,
        fingers: str,
        direction: str = "",
    ) -> Optional[GestureConfigRecord]:
        with self._lock:
            return self._records.get((application, gesture_type, fingers, direction))

    def has_gesture_config(
        self,
        application: str,
        gesture_type: str,
        fingers: str,
        direction: str = "",
    ) -> bool:
        return self.get_gesture_config(application, gesture_type, fingers, direction) is not None

    def records(self) -> List[GestureConfigRecord]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return list(self._records.values())

    def applications(self) -> List[str]:
        with self._lock:
            return sorted({record.application for record in self._records.values()})

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

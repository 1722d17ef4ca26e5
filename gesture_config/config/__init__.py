"""
Configuration subsystem for gesture configuration loading.

Modules:
- bootstrap: Copy the system default config on first run
- parser: Parse the XML config file into a generic node tree
- mapper: Turn the node tree into gesture records
- file_watcher: Monitor the config file for changes
- loader: Orchestrate bootstrap, load and hot-reload
"""

from .bootstrap import ensure_user_config
from .parser import parse_document
from .mapper import map_into, map_records
from .file_watcher import ConfigWatcher
from .loader import ConfigLoader

__all__ = [
    "ensure_user_config",
    "parse_document",
    "map_into",
    "map_records",
    "ConfigWatcher",
    "ConfigLoader",
]

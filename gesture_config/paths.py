"""
Home directory resolution and configuration file locations.

The user configuration lives in ``<home>/.config/touchegg/touchegg.conf`` and is
seeded from ``/usr/share/touchegg/touchegg.conf`` on first run. Every part of
that layout can be injected, which keeps tests away from the real home.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .errors import HomeUnresolvable

logger = logging.getLogger(__name__)

SYSTEM_CONFIG_DIR = Path("/usr/share/touchegg")
USER_CONFIG_SUBDIR = ".config/touchegg"
CONFIG_FILENAME = "touchegg.conf"

SYSTEM_DIR_ENV_VAR = "GESTURE_CONFIG_SYSTEM_DIR"


def resolve_home(environ: Optional[Mapping[str, str]] = None, uid: Optional[int] = None) -> Path:
    """
    Determine the current user's home directory.

    $HOME is checked first. Service managers and elevated invocations do not
    always propagate it, so fall back to the account database entry of the
    effective user id.

    Args:
        environ: Environment mapping (defaults to os.environ)
        uid: User id to look up (defaults to the effective uid)

    Returns:
        Home directory path

    Raises:
        HomeUnresolvable: If $HOME is unset and the account lookup fails
    """
    if environ is None:
        environ = os.environ

    home = environ.get("HOME")
    if home:
        return Path(home)

    try:
        import pwd
    except ImportError:
        raise HomeUnresolvable("no account database on this platform")

    if uid is None:
        uid = os.geteuid()

    try:
        user_info = pwd.getpwuid(uid)
    except KeyError:
        raise HomeUnresolvable(f"getpwuid: no account for uid {uid}")

    if not user_info.pw_dir:
        raise HomeUnresolvable(f"pw_dir: empty home directory for uid {uid}")

    logger.debug(f"$HOME not set, using account home {user_info.pw_dir}")
    return Path(user_info.pw_dir)


class ConfigPaths(BaseModel):
    """File layout of the gesture configuration."""

    home: Optional[Path] = Field(None, description="Home directory (resolved lazily when unset)")
    system_config_dir: Path = Field(SYSTEM_CONFIG_DIR, description="Directory of the installed default")
    user_config_subdir: str = Field(USER_CONFIG_SUBDIR, description="Config directory relative to home")
    config_filename: str = Field(CONFIG_FILENAME, description="Configuration file name")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ConfigPaths":
        """Build paths honouring the system directory override variable."""
        if environ is None:
            environ = os.environ

        system_dir = environ.get(SYSTEM_DIR_ENV_VAR)
        if system_dir and overrides.get("system_config_dir") is None:
            overrides["system_config_dir"] = Path(system_dir)

        return cls(**{k: v for k, v in overrides.items() if v is not None})

    def home_dir(self) -> Path:
        if self.home is not None:
            return self.home
        return resolve_home()

    @property
    def user_config_dir(self) -> Path:
        return self.home_dir() / self.user_config_subdir

    @property
    def user_config_file(self) -> Path:
        return self.user_config_dir / self.config_filename

    @property
    def system_config_file(self) -> Path:
        return self.system_config_dir / self.config_filename

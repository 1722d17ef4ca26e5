"""
First-run bootstrap of the user configuration file.

If ~/.config/touchegg/touchegg.conf does not exist it is copied from the
installed default. Existing user files are never touched.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from ..errors import BootstrapFailed, DefaultConfigMissing
from ..paths import ConfigPaths

logger = logging.getLogger(__name__)


def ensure_user_config(paths: ConfigPaths) -> Path:
    """
    Make sure the user configuration file exists.

    Args:
        paths: Configuration file layout

    Returns:
        Path to the user configuration file

    Raises:
        HomeUnresolvable: If the home directory cannot be determined
        DefaultConfigMissing: If the user file and the system default are both missing
        BootstrapFailed: If copying the default fails
    """
    user_file = paths.user_config_file
    if user_file.exists():
        return user_file

    system_file = paths.system_config_file
    if not system_file.exists():
        raise DefaultConfigMissing(system_file)

    logger.info(f"Creating {user_file} from {system_file}")
    _copy_atomic(system_file, user_file)
    return user_file


def _copy_atomic(source: Path, destination: Path) -> None:
    """Copy bytes to a temp file next to destination, then rename into place."""
    tmp_name = None
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)

        with open(source, "rb") as src, tempfile.NamedTemporaryFile(
            dir=destination.parent,
            prefix=f".{destination.name}.",
            suffix=".tmp",
            delete=False
        ) as tmp:
            tmp_name = tmp.name
            shutil.copyfileobj(src, tmp)
            tmp.flush()
            os.fsync(tmp.fileno())

        os.replace(tmp_name, destination)
        tmp_name = None
    except OSError as e:
        raise BootstrapFailed(destination, str(e)) from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.debug(f"Could not remove temporary file {tmp_name}")

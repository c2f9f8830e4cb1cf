"""
config.py
Locating the goweek profile directory and loading the config and template
files stored there.

Public API:
 - resolve_profile_dir(env=None) -> str
 - load_config(profile_dir) -> GoWeekConfig
 - read_template(profile_dir) -> str
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import json
import os

from .exceptions import ConfigError
from .utils.utils import get_logger, read_json, read_text

logger = get_logger(__name__)

PROFILE_DIR_NAME = ".goweek"
CONFIG_FILE_NAME = "config.json"
TEMPLATE_FILE_NAME = "template.md"


@dataclass(frozen=True)
class GoWeekConfig:
    """Settings read from ``config.json``.

    Attributes
    ----------
    docs_dir : str
        Root of the reports repository; monthly folders live directly under it.
    typora_path : str
        Path to the editor executable used to open new reports.

    """

    docs_dir: str
    typora_path: str


def resolve_profile_dir(env: Optional[Mapping[str, str]] = None) -> str:
    """Return the per-user profile directory holding config and template.

    The directory is ``.goweek`` under ``USERPROFILE``; hosts without that
    variable fall back to the user's home directory.

    Args:
        env : Environment mapping to consult (default: ``os.environ``).

    Returns:
        Path to the profile directory. The directory is not required to exist.

    """
    env = os.environ if env is None else env
    base = env.get("USERPROFILE") or os.path.expanduser("~")
    return os.path.join(base, PROFILE_DIR_NAME)


def load_config(profile_dir: str) -> GoWeekConfig:
    """Load ``config.json`` from the profile directory.

    Args:
        profile_dir : Directory containing ``config.json``.

    Returns:
        The parsed GoWeekConfig.

    Raises:
        ConfigError: when the file is missing, is not valid JSON, or lacks a
            required string field.

    """
    path = os.path.join(profile_dir, CONFIG_FILE_NAME)
    try:
        data = read_json(path)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    values = {}
    for key in ("docs_dir", "typora_path"):
        value = data.get(key)
        if not isinstance(value, str) or not value:
            raise ConfigError(f"Config file {path} is missing string field '{key}'")
        values[key] = value

    logger.debug("Loaded config from %s", path)
    return GoWeekConfig(**values)


def read_template(profile_dir: str) -> str:
    """Read the weekly report template from the profile directory.

    Args:
        profile_dir : Directory containing ``template.md``.

    Returns:
        The raw template text.

    Raises:
        ConfigError: when the template cannot be read.

    """
    path = os.path.join(profile_dir, TEMPLATE_FILE_NAME)
    try:
        return read_text(path)
    except FileNotFoundError:
        raise ConfigError(f"Template file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading template {path}: {e}")

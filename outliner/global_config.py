"""Global configuration locations for the outliner.

The outline document (which also carries the keybindings and archive
retention) lives in ~/.outliner/outline.json unless a path is given.
"""

import os
from pathlib import Path

OUTLINE_FILE_ENV = "OUTLINER_FILE"


def get_config_dir() -> Path:
    """Get the outliner config directory."""
    config_dir = Path.home() / ".outliner"
    config_dir.mkdir(exist_ok=True)
    return config_dir


def default_outline_path() -> Path:
    """Default outline file, honouring the OUTLINER_FILE environment variable."""
    env_path = os.environ.get(OUTLINE_FILE_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "outline.json"

"""Reading and writing JSON documents on disk.

Failures come back as ``Err(message)`` so the CLI can report them and the
TUI can keep running after a failed save.
"""

import json
import logging
from pathlib import Path
from typing import Any

from outliner.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class JsonStorage:
    """File access for one-object JSON documents.

    Knows nothing about outlines; :class:`OutlineRepository` turns the
    loaded object into a model.
    """

    def load_json(self, path: Path) -> Result[dict[str, Any], str]:
        """Read ``path`` and parse it as a JSON object.

        Returns:
            Ok(object), or Err(message) when the file is missing,
            unreadable, not JSON, or holds something other than an object.
        """
        if not path.exists():
            return Err(f"No outline file at {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except PermissionError:
            return Err(f"Not allowed to read {path}")
        except OSError as e:
            return Err(f"Could not read {path}: {e}")

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            return Err(f"{path} is not valid JSON: {e}")

        if not isinstance(document, dict):
            return Err(f"{path} does not hold a JSON object")
        return Ok(document)

    def save_json(self, path: Path, document: dict[str, Any]) -> Result[None, str]:
        """Write ``document`` to ``path``, creating parent directories.

        The text goes to ``<name>.tmp`` beside the target and is renamed
        over it, so an interrupted write leaves the previous file intact.
        """
        try:
            text = json.dumps(document, indent=2, ensure_ascii=False)
        except TypeError as e:
            return Err(f"Outline cannot be written as JSON: {e}")

        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, encoding="utf-8")
            tmp.replace(path)
        except PermissionError:
            return Err(f"Not allowed to write {path}")
        except OSError as e:
            return Err(f"Could not write {path}: {e}")

        logger.info(f"Saved {path}")
        return Ok(None)

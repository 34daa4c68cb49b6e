"""Repository for the outline document.

Wraps outline file operations with Result-based error handling.
"""

import logging
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from outliner.domain.outline.models import Outline
from outliner.domain.shared.result import Err, Ok, Result
from outliner.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


class OutlineRepository:
    """Loads and saves one outline document."""

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Location of the outline JSON file.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = path
        self._storage = storage or JsonStorage()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Result[Outline, str]:
        """Load the outline.

        Returns:
            Ok(Outline) if successful, Err(str) with error message if failed.
        """
        result = self._storage.load_json(self.path)
        if isinstance(result, Err):
            return result

        try:
            outline = Outline.model_validate(result.value)
        except ValidationError as e:
            return Err(f"Invalid outline data in {self.path}: {e}")

        logger.info(f"Loaded {len(outline.groups)} groups from {self.path}")
        return Ok(outline)

    def save(self, outline: Outline) -> Result[None, str]:
        """Persist the outline.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        return self._storage.save_json(self.path, outline.model_dump(mode="json"))

    def load_or_create(self, now: datetime) -> Result[Outline, str]:
        """Load the outline, writing the welcome document if there is none.

        A file that exists but cannot be read is an error, never replaced.
        """
        if self.exists():
            return self.load()

        logger.info(f"No outline at {self.path}, creating the welcome outline")
        outline = Outline.welcome(now)
        saved = self.save(outline)
        if isinstance(saved, Err):
            return saved
        return Ok(outline)

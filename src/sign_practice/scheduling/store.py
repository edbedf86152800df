"""
Persistence of review state.

The scheduler itself never touches storage; callers load a mapping of sign id
to ReviewItem, run reviews, and save the mapping back through a store.
"""

import copy
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .scheduler import ReviewItem

logger = logging.getLogger(__name__)


class ReviewStore(ABC):
    """Load and save the sign id -> ReviewItem mapping."""

    @abstractmethod
    def load(self) -> Dict[str, ReviewItem]:
        """Return the stored mapping (empty if nothing has been saved)."""

    @abstractmethod
    def save(self, items: Mapping[str, ReviewItem]) -> None:
        """Replace the stored mapping."""


def serialize_items(items: Mapping[str, ReviewItem]) -> Dict[str, Dict[str, Any]]:
    return {sign_id: item.to_dict() for sign_id, item in items.items()}


def deserialize_items(data: Any, source: str = "storage") -> Dict[str, ReviewItem]:
    """
    Parse a persisted mapping, skipping records that cannot be read.

    Args:
        data: Decoded JSON value
        source: Description of where the data came from, for log messages

    Returns:
        Mapping of sign id to ReviewItem
    """
    if not isinstance(data, dict):
        logger.warning(f"Ignoring review state in {source}: expected an object, got {type(data).__name__}")
        return {}

    items = {}
    for sign_id, record in data.items():
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed review record {sign_id!r} in {source}")
            continue
        try:
            items[sign_id] = ReviewItem.from_dict(record)
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Skipping malformed review record {sign_id!r} in {source}: {e}")

    return items


class InMemoryReviewStore(ReviewStore):
    """Store that keeps the serialized mapping in memory."""

    def __init__(self, initial: Optional[Mapping[str, Dict[str, Any]]] = None):
        self._data = copy.deepcopy(dict(initial)) if initial else {}

    def load(self) -> Dict[str, ReviewItem]:
        return deserialize_items(copy.deepcopy(self._data), source="memory")

    def save(self, items: Mapping[str, ReviewItem]) -> None:
        self._data = serialize_items(items)

    @property
    def data(self) -> Dict[str, Dict[str, Any]]:
        """Serialized form of the last saved mapping."""
        return copy.deepcopy(self._data)


class JsonFileReviewStore(ReviewStore):
    """Store backed by a JSON file."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the store.

        Args:
            path: JSON file holding the mapping; created on first save
        """
        self.path = Path(path).expanduser()

    def load(self) -> Dict[str, ReviewItem]:
        if not self.path.exists():
            logger.info(f"No review state at {self.path}, starting fresh")
            return {}

        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read review state {self.path}: {e}")
            return {}

        items = deserialize_items(data, source=str(self.path))
        logger.debug(f"Loaded {len(items)} review items from {self.path}")
        return items

    def save(self, items: Mapping[str, ReviewItem]) -> None:
        """
        Write the mapping to disk.

        Raises:
            OSError: If the file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        with open(tmp_path, 'w') as f:
            json.dump(serialize_items(items), f, indent=2, sort_keys=True)
        tmp_path.replace(self.path)

        logger.debug(f"Saved {len(items)} review items to {self.path}")

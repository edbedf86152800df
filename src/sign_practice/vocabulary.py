"""
The fixed vocabulary of signs a learner practises.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from .recognition.signs import Sign


@dataclass(frozen=True)
class SignEntry:
    """One vocabulary entry."""
    id: str
    category: str = ""
    gloss: str = ""

    @property
    def ai_supported(self) -> bool:
        """Whether the recognizer can check this sign from the camera."""
        return Sign.from_label(self.id) is not None


def load_vocabulary(entries: Iterable[Any]) -> List[SignEntry]:
    """
    Build the vocabulary from config entries.

    Args:
        entries: Mappings with ``id`` and optional ``category`` / ``gloss``

    Returns:
        Entries in configuration order

    Raises:
        ValueError: If an entry has no id or an id appears twice
    """
    vocabulary = []
    seen = set()

    for entry in entries:
        sign_id = entry.get('id')
        if not sign_id:
            raise ValueError(f"Vocabulary entry without an id: {dict(entry)}")
        sign_id = str(sign_id)
        if sign_id in seen:
            raise ValueError(f"Duplicate vocabulary entry: {sign_id}")
        seen.add(sign_id)

        vocabulary.append(SignEntry(
            id=sign_id,
            category=str(entry.get('category') or ""),
            gloss=str(entry.get('gloss') or ""),
        ))

    return vocabulary


def default_vocabulary() -> List[SignEntry]:
    """Vocabulary shipped in the packaged default configuration."""
    from .utils.config import ConfigManager

    return load_vocabulary(ConfigManager().get_default_config()['vocabulary'])


def find_entry(vocabulary: Iterable[SignEntry], sign_id: str) -> Optional[SignEntry]:
    for entry in vocabulary:
        if entry.id == sign_id:
            return entry
    return None

from __future__ import annotations

from typing import Dict, List, Optional

from .catalog import NOTE_COLLECTIONS
from .logger_config import logger
from .models import NoteLabelTheme
from .note_labels import NOTE_LABEL_THEME_DATA

NOTE_LABEL_THEMES: Dict[str, NoteLabelTheme] = {
    key: NoteLabelTheme(**data) for key, data in NOTE_LABEL_THEME_DATA.items()
}


def get_note_label_theme(theme: str) -> Optional[NoteLabelTheme]:
    return NOTE_LABEL_THEMES.get(theme)


def get_note_collection_labels(collection_key: str, theme: str) -> Optional[List[str]]:
    """Twelve labels of ``theme`` with the collection's own overrides applied."""
    collection = NOTE_COLLECTIONS.get(collection_key)
    label_theme = NOTE_LABEL_THEMES.get(theme)
    if collection is None or label_theme is None:
        logger.debug("No labels for collection %r with theme %r", collection_key, theme)
        return None

    labels = list(label_theme.labels)
    for pitch_class, label in collection.labels_override.get(theme, {}).items():
        labels[pitch_class] = label
    return labels

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Iterable, List, Optional

from .catalog import NOTE_COLLECTIONS
from .logger_config import logger
from .models import NoteCollection, SearchOptions, coerce_options
from .utils import summarize_text

SEARCH_ALIASES = {
    "♭": ["b", "flat"],
    "♯": ["#", "sharp"],
    "♮": ["n", "natural"],
    "𝄫": ["bb", "doubleflat"],
    "𝄪": ["##", "doublesharp"],
    "M": ["maj", "major"],
    "m": ["min", "minor"],
    "°": ["dim", "diminished"],
    "+": ["aug", "augmented"],
    "ø": ["halfdiminished"],
    "7": ["seventh"],
    "dominant": ["dom"],
}

# "M" and "m" stay distinct; every other word matches case-insensitively
CASE_SENSITIVE_WORDS = frozenset(["M", "m"])

STRIPPED_CHARACTERS = re.compile(r"[-()]")
WHITESPACE = re.compile(r"\s+")


def _build_alias_patterns() -> List[tuple]:
    pairs = [(alias, canonical) for canonical, aliases in SEARCH_ALIASES.items() for alias in aliases]
    # longer aliases first so "bb" wins over "b"
    pairs.sort(key=lambda pair: len(pair[0]), reverse=True)
    return [
        (
            re.compile(rf"(?<![A-Za-z0-9_]){re.escape(alias)}(?=[0-9]|(?![A-Za-z0-9_]))", re.IGNORECASE),
            canonical,
        )
        for alias, canonical in pairs
    ]


ALIAS_PATTERNS = _build_alias_patterns()


def normalize_search_term(text: str) -> str:
    normalized = text.strip()
    for pattern, canonical in ALIAS_PATTERNS:
        normalized = pattern.sub(canonical, normalized)
    normalized = STRIPPED_CHARACTERS.sub("", normalized)
    return WHITESPACE.sub(" ", normalized).strip()


def contains_word(text: str, word: str) -> bool:
    flags = 0 if word in CASE_SENSITIVE_WORDS else re.IGNORECASE
    return re.search(rf"(?<!\w){re.escape(word)}(?!\w)", text, flags) is not None


def _joined_normalized(values: Iterable[str]) -> str:
    return " ".join(normalize_search_term(value) for value in values)


def _ranking_passes(query: str) -> List[Callable[[NoteCollection], bool]]:
    return [
        lambda collection: normalize_search_term(collection.primary_name) == query,
        lambda collection: any(normalize_search_term(name) == query for name in collection.names),
        lambda collection: normalize_search_term(collection.primary_name).startswith(query),
        lambda collection: any(normalize_search_term(name).startswith(query) for name in collection.names),
    ]


def search_note_collections(options: Any = None, **kwargs: Any) -> List[NoteCollection]:
    """Filter the catalog by type and intervals, then rank by a free-text query.

    Ranking order: exact primary name, exact alternative name, primary name
    prefix, alternative name prefix, then every other text match in catalog
    order. Without a query the filtered catalog order is returned.
    """
    opts = coerce_options(options, SearchOptions)
    if kwargs:
        opts = SearchOptions.model_validate({**opts.model_dump(), **kwargs})

    candidates = list(NOTE_COLLECTIONS.values())

    if opts.type:
        type_words = normalize_search_term(opts.type).split()
        candidates = [
            collection
            for collection in candidates
            if all(contains_word(_joined_normalized(collection.type), word) for word in type_words)
        ]

    if opts.intervals:
        candidates = [
            collection
            for collection in candidates
            if all(interval in collection.intervals for interval in opts.intervals)
        ]

    if not opts.query:
        return candidates

    query = normalize_search_term(opts.query)
    if not query:
        return candidates

    logger.debug("Searching note collections for %r", summarize_text(query))
    query_words = query.split()
    matches = []
    for collection in candidates:
        searchable = _joined_normalized(
            [collection.primary_name, *collection.names, *collection.type, *collection.characteristics]
        )
        if all(contains_word(searchable, word) for word in query_words):
            matches.append(collection)

    ranked: Dict[str, NoteCollection] = {}
    for matches_pass in _ranking_passes(query):
        for collection in matches:
            if collection.key not in ranked and matches_pass(collection):
                ranked[collection.key] = collection
    for collection in matches:
        ranked.setdefault(collection.key, collection)
    return list(ranked.values())


def find_note_collection(options: Any = None, **kwargs: Any) -> Optional[NoteCollection]:
    results = search_note_collections(options, **kwargs)
    if not results:
        return None
    return results[0]

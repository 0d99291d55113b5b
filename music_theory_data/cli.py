from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .catalog import get_chord_details_for_mode_key
from .collection_labels import NOTE_LABEL_THEMES, get_note_collection_labels
from .intervals import normalize_interval
from .logger_config import logger, set_log_level
from .note_names import get_note_names_from_collection
from .search import search_note_collections


def _notes(args: argparse.Namespace) -> int:
    names = get_note_names_from_collection(
        args.root,
        args.collection,
        {
            "fill_chromatic": args.fill_chromatic,
            "rotate_to_root_integer_0": args.rotate_to_c,
            "filter_out_octave": args.no_octave,
        },
    )
    if not names:
        logger.error("Could not resolve notes for %s %s", args.root, args.collection)
        return 1
    print(" ".join(names))
    return 0


def _search(args: argparse.Namespace) -> int:
    results = search_note_collections(query=args.query, type=args.type, intervals=args.interval)
    logger.info("Found %d note collections", len(results))
    for collection in results[: args.limit]:
        print(f"{collection.key}\t{collection.primary_name}\t{' '.join(collection.intervals)}")
    return 0


def _labels(args: argparse.Namespace) -> int:
    labels = get_note_collection_labels(args.collection, args.theme)
    if labels is None:
        logger.error("Unknown collection or theme: %s %s", args.collection, args.theme)
        return 1
    print(" ".join(label or "-" for label in labels))
    return 0


def _chords(args: argparse.Namespace) -> int:
    details = get_chord_details_for_mode_key(args.mode)
    if not details:
        logger.error("Not a diatonic, harmonic minor or melodic minor mode: %s", args.mode)
        return 1
    for detail in details:
        print(f"{detail.interval}\t{detail.roman_triad}\t{detail.roman_seventh}")
    return 0


def _normalize(args: argparse.Namespace) -> int:
    status = 0
    for value in args.values:
        interval = normalize_interval(value)
        if interval is None:
            status = 1
        print(f"{value}\t{interval if interval is not None else '?'}")
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query scales, chords and interval spellings.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    notes = subparsers.add_parser("notes", help="Spell a collection from a root note.")
    notes.add_argument("root", help="Root note, e.g. C, F#, Bb.")
    notes.add_argument("collection", help="Collection key, e.g. ionian, dominant7.")
    notes.add_argument("--fill-chromatic", action="store_true", help="Spell all twelve pitch classes.")
    notes.add_argument("--rotate-to-c", action="store_true", help="Start a chromatic fill on C.")
    notes.add_argument("--no-octave", action="store_true", help="Drop the octave.")
    notes.set_defaults(handler=_notes)

    search = subparsers.add_parser("search", help="Search the catalog.")
    search.add_argument("query", nargs="?", default=None, help="Free text, e.g. 'major scale'.")
    search.add_argument("--type", default=None, help="Type tags every result must carry.")
    search.add_argument("--interval", action="append", default=None, help="Interval every result must contain.")
    search.add_argument("--limit", type=int, default=20, help="Maximum results to print.")
    search.set_defaults(handler=_search)

    labels = subparsers.add_parser("labels", help="Show the twelve labels of a collection.")
    labels.add_argument("collection", help="Collection key.")
    labels.add_argument("theme", choices=sorted(NOTE_LABEL_THEMES), help="Label theme.")
    labels.set_defaults(handler=_labels)

    chords = subparsers.add_parser("chords", help="Show the triad and seventh on each degree of a mode.")
    chords.add_argument("mode", help="Mode key, e.g. dorian, phrygianDominant.")
    chords.set_defaults(handler=_chords)

    normalize = subparsers.add_parser("normalize", help="Normalize interval spellings.")
    normalize.add_argument("values", nargs="+", help="Intervals such as M3, b7, x4.")
    normalize.set_defaults(handler=_normalize)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())

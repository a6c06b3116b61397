"""Console walkthrough of the notes store API"""

import argparse
import sys

from loguru import logger

from jotter.config import Settings, settings
from jotter.notes_stores import InMemoryNotesStore


def _print_notes(notes, label: str) -> None:
    print(f"{label}: {len(notes)}")
    for note in notes:
        print(f"- {note.title} (ID: {note.id})")


def main(config: Settings = settings) -> InMemoryNotesStore:
    print("=== CREATE STORE ===")
    store = InMemoryNotesStore.from_settings(config)
    print(f"Total notes: {store.get_notes_count()}")

    print("\n=== ADD NOTES ===")
    first = store.add_note("# My first note\nThis is the content of my first Markdown note.")
    print(f"Note 1 added: {first.success}")
    second = store.add_note(
        "# Learning Python\nToday I learned about lists and comprehensions with map and filter."
    )
    print(f"Note 2 added: {second.success}")
    third = store.add_note(
        "# Task list\n- Study closures\n- Practice with objects\n- Do list exercises",
        "Today's tasks",
    )
    print(f"Note 3 added: {third.success}")

    print("\n=== VALIDATION: EMPTY NOTE ===")
    empty = store.add_note("   ")
    print(f"Result: {empty.message}")

    print("\n=== ALL NOTES ===")
    _print_notes(store.get_all_notes(), "Total notes")

    print("\n=== NOTE BY ID ===")
    found = store.get_note_by_id(first.note.id)
    print(f"Found: {found.title}")
    print(f"Content: {found.content}")

    print("\n=== UPDATE NOTE ===")
    updated = store.update_note(
        first.note.id,
        {"content": "# My first note, updated\nI changed the content of this note."},
    )
    print(f"Update succeeded: {updated.success}")
    print(f"New title: {updated.note.title}")

    print("\n=== MARK AS FAVORITE ===")
    favorite = store.update_note(second.note.id, {"favorite": True})
    print(f"Marked as favorite: {favorite.success}")

    print("\n=== SEARCH NOTES ===")
    _print_notes(store.search_notes("Python"), "Notes found")

    print("\n=== NOTES BY DATE ===")
    for note in store.get_notes_ordered_by_date():
        print(f"- {note.title} (Updated: {note.updated:%Y-%m-%d %H:%M:%S})")

    print("\n=== FAVORITE NOTES ===")
    _print_notes(store.get_favorite_notes(), "Favorites")

    print("\n=== DELETE NOTE ===")
    deleted = store.delete_note(third.note.id)
    print(f"Delete succeeded: {deleted.success}")
    print(f"Total notes after delete: {store.get_notes_count()}")

    print("\n=== ENCAPSULATION ===")
    print("The note list is private to the store and only reachable through its methods.")
    print(f"Total notes (public method): {store.get_notes_count()}")

    return store


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--id-strategy",
        type=str,
        choices=["sequential", "timestamp"],
        required=False,
        help="How note IDs are generated",
        default=settings.id_strategy,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        required=False,
        help="Log level for store events written to stderr",
        default=settings.log_level,
    )

    args = parser.parse_args()

    logger.configure(handlers=[{"sink": sys.stderr, "level": args.log_level}])
    main(config=settings.model_copy(update={"id_strategy": args.id_strategy}))

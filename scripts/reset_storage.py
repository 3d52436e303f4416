"""Reset the stored platform document.

Usage examples::

    python -m scripts.reset_storage --yes

    # Recreate the schema and store the default catalogue in the document
    python scripts/reset_storage.py --yes --seed-courses \
        --database-url sqlite:///./adaptlearn_local.db

The script recreates the ``storage_entries`` table when missing, deletes the
document stored under ``STORAGE_KEY`` (users, current user, catalogue and
progress) and optionally writes the default catalogue back.

**Warning**: This is destructive. Always verify you are targeting the correct
database before running in production.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path when executed as a module or script.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from adaptlearn.db import session as session_module  # noqa: E402
from adaptlearn.db.base import Base  # noqa: E402
from adaptlearn.db.initial_data import get_default_courses  # noqa: E402
from adaptlearn.storage.document_store import SqlDocumentStore  # noqa: E402


def reset_document(key: str | None = None, *, seed_courses: bool = False) -> None:
    """Delete the document and optionally store the default catalogue."""

    Base.metadata.create_all(bind=session_module.engine)

    session = session_module.SessionLocal()
    try:
        store = SqlDocumentStore(session, key=key)
        store.clear()
        if seed_courses:
            store.save({"courses": [course.to_document() for course in get_default_courses()]})
    finally:
        session.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reset the stored platform document")
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Confirm the destructive reset without an interactive prompt.",
    )
    parser.add_argument(
        "--seed-courses",
        action="store_true",
        help="Write the default catalogue into the fresh document.",
    )
    parser.add_argument(
        "--key",
        default=None,
        help="Override settings.STORAGE_KEY.",
    )
    parser.add_argument(
        "--database-url",
        dest="database_url",
        default=None,
        help="Override settings.DATABASE_URL (useful for targeting another environment).",
    )
    args = parser.parse_args(argv)

    if not args.yes:
        parser.error("reset_storage requires --yes to acknowledge the destructive operation.")

    if args.database_url:
        session_module.configure_database(args.database_url, allow_fallback=False)

    print("⚠️  Deleting the stored document…")
    reset_document(args.key, seed_courses=args.seed_courses)
    print("✅ Document reset.")
    if args.seed_courses:
        print("✅ Default catalogue stored.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

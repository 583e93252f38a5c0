"""Utility script to register a board so notifications can link to it."""

from __future__ import annotations

import argparse

from boardnotify.domain.entities import Board
from boardnotify.domain.exceptions import StorageError
from boardnotify.infrastructure.database import SessionLocal, initialize_database
from boardnotify.infrastructure.repositories import BoardRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for board creation."""

    parser = argparse.ArgumentParser(description="Create a board record.")
    parser.add_argument("board_id", help="Identifier of the board")
    parser.add_argument("--title", default="", help="Board title shown in messages")
    return parser.parse_args()


def main() -> None:
    """Create a board using the provided command line arguments."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        board = BoardRepository(session).create(Board(id=args.board_id, title=args.title))
    except StorageError as exc:
        raise SystemExit(f"Could not create the board: {exc}") from exc
    finally:
        session.close()

    print(f"Board '{board.id}' created.")


if __name__ == "__main__":
    main()

"""Utility script to print an access token for a user id."""

from __future__ import annotations

import argparse
from datetime import timedelta

from boardnotify.infrastructure.security import create_access_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for token creation."""

    parser = argparse.ArgumentParser(
        description="Issue a bearer token accepted by the notifications API.",
    )
    parser.add_argument("user_id", help="Identifier of the user the token represents")
    parser.add_argument(
        "--minutes",
        type=int,
        default=None,
        help="Token lifetime in minutes (default: ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    return parser.parse_args()


def main() -> None:
    """Print a signed token for the requested user."""

    args = parse_args()
    if not args.user_id:
        raise SystemExit("A user id is required.")

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    print(create_access_token({"sub": args.user_id}, expires_delta=expires))


if __name__ == "__main__":
    main()

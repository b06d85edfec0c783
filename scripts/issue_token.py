#!/usr/bin/env python3
"""
issue_token.py - Mint a bearer token for an author

The gallery API has no login flow; tokens are issued out of band with the
same secret the server uses (JWT_SECRET, read from the environment or .env).

Usage:
    python scripts/issue_token.py alice@example.com
    python scripts/issue_token.py alice@example.com --nickname Alice --minutes 60
"""

import sys
import argparse
import logging
from datetime import timedelta
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from gallery.modules.authors.auth import AuthService  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Issue a JWT access token for a gallery author",
    )
    parser.add_argument("email", help="Author email (token subject)")
    parser.add_argument("--nickname", default=None, help="Display name stored in the token")
    parser.add_argument(
        "--minutes",
        type=int,
        default=None,
        help="Lifetime in minutes (default: ACCESS_TOKEN_EXPIRE_MINUTES)",
    )
    args = parser.parse_args()

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    token = AuthService.create_access_token(args.email, args.nickname, expires)
    logger.info(f"Issued token for {args.email}")
    print(token)


if __name__ == "__main__":
    main()

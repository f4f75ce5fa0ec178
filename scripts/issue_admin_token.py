#!/usr/bin/env python
"""Issue a bearer token for the admin panel.

Admin login lives outside this service. This script signs a token with
ADMIN_JWT_SECRET so operators and local development can call the admin
routes.

Usage:
    python scripts/issue_admin_token.py --admin-id 1 --username gerente
    python scripts/issue_admin_token.py --admin-id 1 --hours 2

Requirements:
    - ADMIN_JWT_SECRET, SUPABASE_URL and SUPABASE_SECRET_KEY must be set
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.api.middleware.auth import create_admin_token
from src.core.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Issue an admin bearer token")
    parser.add_argument("--admin-id", type=int, required=True, help="Admin identifier (sub claim)")
    parser.add_argument("--username", default=None, help="Admin login name")
    parser.add_argument(
        "--hours",
        type=int,
        default=None,
        help="Token lifetime in hours (defaults to ADMIN_TOKEN_TTL_HOURS)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()

    hours = args.hours if args.hours is not None else settings.admin_token_ttl_hours
    if hours < 1:
        logger.error("Token lifetime must be at least one hour")
        return 1

    token = create_admin_token(args.admin_id, username=args.username, ttl_seconds=hours * 3600)
    logger.info("Issued token for admin %s valid for %d hours", args.admin_id, hours)
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())

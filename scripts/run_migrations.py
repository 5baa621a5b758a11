#!/usr/bin/env python3
"""Upgrade the blog schema to a revision (head by default)."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from blog.config import Settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Run migrations up to ``revision`` and log failures to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config("alembic.ini"), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))

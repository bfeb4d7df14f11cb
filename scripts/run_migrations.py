#!/usr/bin/env python3
"""Bring the schema up to the latest alembic revision."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from surmise.config import Settings
from surmise.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    configure_logfire(Settings())

    with logfire.span("alembic upgrade {revision}", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception:
            # Deploys must stop here rather than serve on an old schema
            logfire.exception("Migration to {revision} failed", revision=revision)
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))

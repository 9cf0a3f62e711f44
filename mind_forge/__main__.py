from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_LEVEL_ENV = "MIND_FORGE_LOG_LEVEL"


def _ensure_repo_root_on_path() -> None:
    """Put the repository root (parent of this package) on ``sys.path``.

    Needed when the file is run directly (``python mind_forge/__main__.py``)
    rather than as a module.
    """
    repo_root_str = str(Path(__file__).resolve().parent.parent)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


try:
    # python -m mind_forge
    from .app import run  # type: ignore[attr-defined]
except ImportError:
    # Run as a plain script.
    _ensure_repo_root_on_path()
    from mind_forge.app import run  # type: ignore[attr-defined]


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def main() -> int:
    """Entry point for running Mind Forge from the command line."""
    configure_logging()
    return run()


if __name__ == "__main__":
    raise SystemExit(main())

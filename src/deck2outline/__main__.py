"""Entry point for deck2outline."""

from __future__ import annotations

import logging

from deck2outline import startup
from deck2outline.cli import run as run_cli


def main() -> None:
    """Application entry point.

    Call like:
    ```
    python -m deck2outline --input-xml deck.xml
    ```
    """
    log: logging.Logger = startup.initialize_application()

    try:
        run_cli()
    except Exception:
        log.exception("Unhandled exception - program crashed.")
        raise


if __name__ == "__main__":
    main()

"""Entry point for the lb-stats CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from lb_stats.cli import build_parser
from lb_stats.common import DashboardError, UserInputError
from lb_stats.observability import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(
        config_path=Path(args.log_config) if args.log_config else None,
        level=args.log_level,
    )

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return int(handler(args))
    except UserInputError as exc:
        logger.error("%s", exc)
        return 1
    except DashboardError as exc:
        logger.error("Error: %s", exc)
        return 1
    except OSError as exc:
        logger.error("filesystem error: %s", exc)
        return 1
    except Exception as exc:  # pragma: no cover
        logger.error("unexpected failure: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

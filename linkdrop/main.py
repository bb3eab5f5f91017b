"""Console host: treats each path argument as a file dropped onto the window."""

import argparse
import logging
import sys
from typing import List, Optional

from linkdrop.config.logging_config import setup_logging
from linkdrop.services.container import ServiceContainer
from linkdrop.services.notifier import StreamNotificationChannel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkdrop",
        description="Resolve dropped .url/.webloc shortcuts into link metadata (JSON lines on stdout)"
    )
    parser.add_argument("paths", nargs="*", help="Shortcut files to treat as dropped")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    parser.add_argument("--log-dir", default=None, help="Also write logs to a file in this directory")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_dir=args.log_dir)

    container = ServiceContainer()
    channel = StreamNotificationChannel(sys.stdout)

    with container.create_drop_handler(channel) as handler:
        handler.on_files_dropped(args.paths)
        logger.info(f"Dispatched {len(args.paths)} dropped file(s)")

    return 0


if __name__ == "__main__":
    sys.exit(main())

import logging
import os
import sys
from typing import List, Optional

from .config import load_settings
from .logging_config import configure_logging
from .storage import save_switches

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    env_level = os.getenv("LOG_LEVEL")

    try:
        # Configure logging early so load_settings() warnings/errors are visible.
        configure_logging(env_level or "INFO")
        settings = load_settings(args[0] if args else None)
        configure_logging(env_level or settings.log_level, settings.log_dir)
    except RuntimeError as exc:
        logger.error("%s", exc)
        print(str(exc), file=sys.stderr)
        return 1

    for sw in settings.switches:
        logger.info("Switch %s: dpid=%s ports=%s", sw.name, sw.dpid_long, sw.ports)

    save_switches(settings.output_dir, settings.switches)
    return 0


if __name__ == "__main__":
    sys.exit(main())

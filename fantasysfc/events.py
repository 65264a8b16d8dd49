"""
Logging setup and structured event lines.
"""
import json
import logging
import sys

logger = logging.getLogger('fantasysfc')


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def log_event(**kv):
    """Emit structured JSON log line on stderr, keeping stdout for results."""
    print(json.dumps(kv, separators=(',', ':')), file=sys.stderr)

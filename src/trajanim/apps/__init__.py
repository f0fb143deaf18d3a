"""Worked pipelines that render the tutorial GIFs."""

import logging


def setup_logging(level=logging.INFO):
    """Setup logging with timestamps for clean output"""

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    # matplotlib and Pillow are chatty at DEBUG while encoding frames
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)
    return logging.getLogger("trajanim")

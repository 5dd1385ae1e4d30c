"""``headerecho run`` — start the sample server."""

import argparse

from headerecho.config import AppConfig
from headerecho.logger import configure_logger
from headerecho.sample import create_app


def run_sample(args: argparse.Namespace) -> None:
    """Build the logger from the environment, then serve ``args.variant``."""
    config = AppConfig.from_env()
    logger = configure_logger(config)
    app = create_app(args.variant, config=config, logger=logger)
    app.run()

#!/usr/bin/env python3
"""
Example: silence the configuration stream warning and echo its arguments
"""

import logging

from log_suppression import SuppressionConfig, get_logger, origin_context


class ConfigUtils:
    """Loader whose warnings are echoed instead of logged"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def load(self, source: str) -> None:
        self.logger.warning("Cannot load configuration from stream %s", source)


def load_plugin(logger: logging.Logger) -> None:
    logger.warning("Cannot load configuration from stream %s", "other.yml")


def main():
    logger = get_logger("plugin_host", SuppressionConfig(include_timestamp=False))

    logger.info("Starting plugin host")

    # Suppressed, prints "[plugin.yml]"
    ConfigUtils(logger).load("plugin.yml")

    # Suppressed silently: no ConfigUtils frame on the stack
    load_plugin(logger)

    # Explicit origin tag instead of stack walking, prints "[other.yml]"
    with origin_context("ConfigUtils"):
        load_plugin(logger)

    logger.info("Plugin host ready")


if __name__ == "__main__":
    main()

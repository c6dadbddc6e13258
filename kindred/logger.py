"""Kindred logger.

This module provides the main logger instance for the kindred package.
It configures Python's warnings system to be captured by the logging system
and creates a logger instance named "kindred" for use throughout the package.
"""

import logging

# Route warnings.warn calls through logging so they share handlers with log records.
logging.captureWarnings(True)

# Main logger instance for the kindred package.
# Import and use directly: `from kindred.logger import KINDRED_LOGGER`
KINDRED_LOGGER: logging.Logger = logging.getLogger("kindred")

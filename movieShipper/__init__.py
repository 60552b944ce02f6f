"""
movieShipper
~~~~~~~~~~~~

Fetches movie metadata from the KOBIS open API and ships it as JSON.

Exports:
  - KOFIC_API_KEY, OUTPUT_FOLDER
  - Utility functions: log_debug, print_progress_bar_cmdln
  - Movie, KoficClient, KobisScraper and the error types
"""

# settings
from movieShipper.settings import KOFIC_API_KEY, OUTPUT_FOLDER

# utils
from movieShipper.utils import log_debug, print_progress_bar_cmdln

# core logic
from movieShipper.metadata import (
    Movie,
    KoficClient,
    KobisScraper,
    KoficError,
    TransportError,
    ParseError,
    NotFoundError,
)

__all__ = [
    # settings
    "KOFIC_API_KEY",
    "OUTPUT_FOLDER",
    # utils
    "log_debug",
    "print_progress_bar_cmdln",
    # core
    "Movie",
    "KoficClient",
    "KobisScraper",
    "KoficError",
    "TransportError",
    "ParseError",
    "NotFoundError",
]

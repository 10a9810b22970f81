"""
Shared utilities for cccedict.

- file_io.py: Opening dictionary files and decoding text/byte streams
- logging_config.py: Logging setup for the CLI (stdlib JSON formatter, loguru bridge)
"""

__all__ = [
    "file_io",
    "logging_config",
]

"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-kata"
CLI_NAME = "pattern-kata"
__version__ = "1.0.0"

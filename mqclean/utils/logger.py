import logging


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; handlers and format are set up by the CLI group."""
    return logging.getLogger(name)

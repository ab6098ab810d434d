"""
CLI utilities for routing log records to the terminal.
"""

from __future__ import annotations

import logging

import click


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes records with click.

    Errors go to stderr in red, warnings are yellow, everything else is
    plain stdout.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if record.levelno >= logging.ERROR:
                click.secho(message, fg="red", err=True)
            elif record.levelno >= logging.WARNING:
                click.secho(message, fg="yellow")
            else:
                click.echo(message)
        except Exception:
            self.handleError(record)


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Attach a ClickEchoHandler to the package logger.

    Args:
        verbose: Show debug records (stage boundaries, command lines)
        quiet: Only show errors

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.INFO

    logger = logging.getLogger("mobeen_auth")
    for handler in list(logger.handlers):
        if isinstance(handler, ClickEchoHandler):
            logger.removeHandler(handler)

    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger

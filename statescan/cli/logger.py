#
# Logging setup shared by the statescan subcommands
#
# Log to stderr or a rotating logfile, optionally mailing errors, with
# --debug/--verbose selecting the level.
#

from __future__ import annotations

import getpass
import logging
import logging.handlers
import socket
from argparse import ArgumentParser, Namespace

DEFAULT_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
DEFAULT_LOG_BYTES = 10_000_000
DEFAULT_LOG_COUNT = 3


def add_args(parser: ArgumentParser) -> None:
    """Add --logfile/--mail-* options and the --debug/--verbose switch."""
    files = parser.add_argument_group("Logfile Options")
    files.add_argument("--logfile", metavar="filename", help="Append log messages to this file")
    files.add_argument(
        "--log-bytes",
        type=int,
        default=DEFAULT_LOG_BYTES,
        metavar="length",
        help=f"Rotate the logfile at this size (default: {DEFAULT_LOG_BYTES})",
    )
    files.add_argument(
        "--log-count",
        type=int,
        default=DEFAULT_LOG_COUNT,
        metavar="count",
        help=f"Rotated logfiles to keep (default: {DEFAULT_LOG_COUNT})",
    )

    mail = parser.add_argument_group("Error Mail Options")
    mail.add_argument(
        "--mail-to",
        action="append",
        metavar="address",
        help="Mail errors to this address (can be repeated)",
    )
    mail.add_argument("--mail-from", metavar="address", help="Sender of error mail")
    mail.add_argument("--mail-subject", metavar="subject", help="Subject of error mail")
    mail.add_argument(
        "--smtp-host",
        default="localhost",
        metavar="host",
        help="SMTP server used for error mail (default: localhost)",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--debug", action="store_true", help="Log every record decision")
    verbosity.add_argument("--verbose", action="store_true", help="Log progress messages")


def log_level(args: Namespace, default: str = "WARNING") -> int | str:
    """Level selected by --debug/--verbose, else default."""
    if args.debug:
        return logging.DEBUG
    if args.verbose:
        return logging.INFO
    return default


def _output_handler(args: Namespace) -> logging.Handler:
    if args.logfile:
        return logging.handlers.RotatingFileHandler(
            args.logfile, maxBytes=args.log_bytes, backupCount=args.log_count
        )
    return logging.StreamHandler()


def _mail_handler(args: Namespace) -> logging.Handler:
    host = socket.getfqdn()
    sender = args.mail_from or f"{getpass.getuser()}@{host}"
    subject = args.mail_subject or f"statescan error on {host}"
    handler = logging.handlers.SMTPHandler(args.smtp_host, sender, args.mail_to, subject)
    handler.setLevel(logging.ERROR)
    return handler


def mk_logger(
    args: Namespace,
    fmt: str | None = None,
    name: str | None = None,
    log_level_default: str = "WARNING",
) -> logging.Logger:
    """Configure and return a logger (the root logger unless name is given).

    Configuring the root logger also routes the statescan library's
    module loggers to the chosen handlers.
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()

    level = log_level(args, log_level_default)
    logger.setLevel(level)
    formatter = logging.Formatter(fmt or DEFAULT_FORMAT)

    handlers = [_output_handler(args)]
    handlers[0].setLevel(level)
    if args.mail_to is not None:
        handlers.append(_mail_handler(args))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger

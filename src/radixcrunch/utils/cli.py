"""
Capture CLI options for logging
"""

import logging
import argparse
import sys


LOGFORMAT = "%(levelname)s:%(name)s: %(message)s"


def logging_argparser():
    """Parser with the logging options, usable as parent parser:
    --log=...     Log level
    --logfile=... Log file
    --stdout=...  Redirect stdout to a file
    --stderr=...  Redirect stderr to a file
    """
    parser = argparse.ArgumentParser(add_help=False)
    group = parser.add_argument_group("logging")
    group.add_argument("--log", default="", type=str, help="Log level")
    group.add_argument("--logfile", default="", type=str, help="Log file")
    group.add_argument(
        "--stdout",
        default="",
        type=str,
        help="Log file for what normally goes to stdout",
    )
    group.add_argument(
        "--stderr",
        default="",
        type=str,
        help="Log file for what normally goes to stderr",
    )
    return parser


def logging_cliconfig(logger, argv=None):
    """Configure logging from command-line options (see logging_argparser)"""
    args, _ = logging_argparser().parse_known_args(argv)
    logging_configure(logger, args)


def logging_configure(logger, args):
    """
    Args:
        logger(logging.Logger)
        args(argparse.Namespace): with log, logfile, stdout and stderr attributes
    """
    hashandlers = logger_has_handlers(logger)

    if args.log and not hashandlers:
        logger.setLevel(args.log.upper())
    if args.logfile:
        logging_filehandler(args.logfile, logger)
    if args.stdout:
        logging_filehandler(args.stdout, logger, error=False)
    elif not hashandlers:
        logging_stdhandler(logger, error=False)
    if args.stderr:
        logging_filehandler(args.stderr, logger, error=True)
    elif not hashandlers:
        logging_stdhandler(logger, error=True)


def logger_has_handlers(logger):
    while logger is not None:
        if bool(logger.handlers):
            return True
        logger = logger.parent
    return False


def logging_stdhandler(logger, error=True):
    """Add stdout or stderr handler"""
    if error:
        stream = sys.stderr
    else:
        stream = sys.stdout
    handler = logging.StreamHandler(stream)
    logging_handlerconfig(handler, error=error)
    logger.addHandler(handler)


def logging_filehandler(filename, logger, error=None):
    """Add file handler"""
    handler = logging.FileHandler(filename)
    logging_handlerconfig(handler, error=error)
    logger.addHandler(handler)


def logging_handlerconfig(handler, error=None):
    handler.setFormatter(logging.Formatter(LOGFORMAT))
    if error is not None:
        handler.addFilter(LevelSplitFilter(error))


class LevelSplitFilter(logging.Filter):
    """Pass WARNING and above (error=True) or everything below WARNING"""

    def __init__(self, error):
        super(LevelSplitFilter, self).__init__()
        self.error = error

    def filter(self, record):
        if self.error:
            return record.levelno >= logging.WARNING
        return record.levelno < logging.WARNING


def getLogger(name, filename):
    if name == "__main__":
        logname = filename
    else:
        logname = name
    logger = logging.getLogger(logname)
    if name == "__main__":
        logging_cliconfig(logger)
    return logger

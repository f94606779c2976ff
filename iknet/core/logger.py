import logging
import os


DEFAULT_LOG_FILENAME = 'train-log.txt'

LINE_FMT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
            "%(levelname)-8s %(message)s")
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, stdout=True, level=logging.DEBUG):
    """ Sets up logging formatting, etc for the `iknet` loggers

    Parameters
    ----------
    filename : str, default=None
        The log file. If None, no file handler is attached. An existing
        file is overwritten.

    stdout : bool, default=True
        If True, then log records are also written to the console.

    level : int, default=logging.DEBUG
        The level of the package logger.

    Returns
    -------
    logger : logging.Logger
        The package level logger
    """
    formatter = logging.Formatter(fmt=LINE_FMT, datefmt=DATE_FMT)

    logger = logging.getLogger('iknet')
    logger.setLevel(level)

    # Repeated calls should not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if filename is not None:
        if os.path.exists(filename):
            os.remove(filename)
        fhandler = logging.FileHandler(filename, mode='w')
        fhandler.setFormatter(formatter)
        logger.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        logger.addHandler(shandler)

    return logger


def progress(logger, msg, i, n, level=logging.DEBUG):
    """ Log `msg` prefixed with a zero-padded `(i / n)` counter
    """
    msg = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
    logger.log(level, msg % i)

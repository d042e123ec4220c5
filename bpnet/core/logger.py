import logging
import os


LINE_FORMAT = ("[%(asctime)s] [%(name)s:%(lineno)d] "
               "%(levelname)-8s %(message)s")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting, etc. for command line runs

    Parameters
    ----------
    filename: str, default=None
        If given, log records are written to this file. An existing file
        is overwritten.

    stdout: bool, default=True
        If True, log records are also written to the console (stderr).

    level: int, default=logging.INFO
        The root logger level.
    """
    formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    # Don't stack handlers when called more than once in a process
    for handler in list(root.handlers):
        if getattr(handler, '_bpnet_handler', False):
            root.removeHandler(handler)
            handler.close()

    handlers = []

    if filename is not None:
        if os.path.exists(filename):
            os.remove(filename)
        handlers.append(logging.FileHandler(filename, mode='w'))

    if stdout:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._bpnet_handler = True
        root.addHandler(handler)

    return root


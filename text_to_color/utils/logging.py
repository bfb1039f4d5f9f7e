import logging, sys

ROOT_LOGGER = "text_to_color"
FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _root():
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(h)
        root.setLevel(logging.INFO)
    return root


def get_logger(name):
    # module loggers propagate to the package logger, which owns the handler
    _root()
    return logging.getLogger(name)


def set_log_level(level):
    _root().setLevel(level.upper() if isinstance(level, str) else level)

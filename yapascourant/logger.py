import logging

LOGGER_NAME = "yapascourant"

_configured = False


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the service logger, attaching the console handler once."""
    global _configured
    root = logging.getLogger(LOGGER_NAME)
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        ))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        root.propagate = False
        _configured = True
    if name == LOGGER_NAME:
        return root
    return root.getChild(name)


def set_level(level: str):
    get_logger().setLevel(level.upper())

import logging
import sys

PACKAGE_LOGGER = "scorebook"


def configure_logging(*, verbose: bool = False) -> None:
    """Send scorebook's own log records to stderr; other libraries only at WARNING.

    Safe to call more than once: the root handler is replaced, not stacked.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))
    root.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)

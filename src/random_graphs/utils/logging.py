import logging
import sys


def get_logger(name: str = "random_graphs", level: int = logging.INFO) -> logging.Logger:
    """
    Return a logger with a single concise stream handler on the current stderr.

    Idempotent: repeated calls replace the handler rather than stacking one,
    so a stream swapped out since the last call is never written to.
    """
    logger = logging.getLogger(name)
    logger.setLevel(int(level))
    logger.propagate = False  # avoid duplicate logs through root

    for h in [h for h in logger.handlers if getattr(h, "_random_graphs_handler", False)]:
        logger.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler._random_graphs_handler = True  # type: ignore[attr-defined]
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger

"""
Logging-Setup für Anwendungen, die laborcalc einbinden.
Die Bibliothek selbst loggt nur über Modul-Logger und konfiguriert nichts.
"""
import logging
import sys

from laborcalc.core.config import settings

LOG_FORMAT = "%(levelname)-8s %(asctime)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Konsolen-Handler auf dem "laborcalc"-Logger; Level aus settings.LOG_LEVEL."""
    logger = logging.getLogger("laborcalc")
    logger.setLevel(level if level is not None else settings.LOG_LEVEL.upper())

    # Mehrfachaufruf soll keine doppelten Handler erzeugen
    for handler in list(logger.handlers):
        if getattr(handler, "_laborcalc", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._laborcalc = True
    logger.addHandler(handler)

    logger.debug("Logging configured (env=%s)", settings.APP_ENV)
    return logger

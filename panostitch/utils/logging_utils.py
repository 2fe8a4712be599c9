from __future__ import annotations
import logging, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from panostitch.cli.validation import Violation, ViolationKind
from panostitch.imaging.formats import SUPPORTED_EXTENSIONS, image_format_for

BANNER = "=" * 75
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

def build_logger(name: str = "panostitch", log_dir: Optional[Path] = None,
                 level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    fmt = logging.Formatter(LOG_FORMAT)

    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        fh = RotatingFileHandler(log_dir / "panostitch.log", maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(level)
        logger.addHandler(fh)

    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    sh.setLevel(level)
    logger.addHandler(sh)
    return logger

def log_violation(logger: logging.Logger, violation: Violation) -> None:
    """ERROR line for a rejected command line, plus the format list when extensions were the problem."""
    logger.error("%s", violation.message)
    if violation.kind in (ViolationKind.NO_SUPPORTED_INPUTS, ViolationKind.UNSUPPORTED_OUTPUT):
        logger.error("Supported formats: %s", ", ".join(SUPPORTED_EXTENSIONS))

def log_options(logger: logging.Logger, options, title: str = "Parsed configuration") -> None:
    """Dump resolved stitching options between banners, enums by their CLI name."""
    logger.info("\n%s\n%s\n%s", BANNER, title, BANNER)
    output = options.output_path
    logger.info("Mode: %s", "batch" if output is not None else "gui")
    if output is not None:
        logger.info("output_format: %s", image_format_for(output))
    for name, value in vars(options).items():
        if name == "input_paths":
            logger.info("%s: %d file(s)", name, len(value))
            for p in value:
                logger.info("  %s", p)
        else:
            logger.info("%s: %s", name, getattr(value, "value", value))

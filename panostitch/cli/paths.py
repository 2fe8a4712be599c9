# panostitch/cli/paths.py
# Turn the positional arguments into the final, sorted list of images.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Union

from panostitch.imaging.formats import keep_supported

log = logging.getLogger("panostitch.cli")

PathArg = Union[str, Path]


class NoSupportedInputs(ValueError):
    """Inputs were given but none of them has a supported image extension."""


def expand_directories(paths: Iterable[PathArg]) -> List[PathArg]:
    """
    Replace every directory with the regular files directly inside it.
    Not recursive; files keep the order the filesystem lists them in.
    Anything else is kept as given, so an empty token stays empty rather
    than standing for the current directory.
    OSError from listing a directory is left to the caller.
    """
    result: List[PathArg] = []
    for path in paths:
        if os.path.isdir(path):
            log.info("Expanding directory: %s", path)
            with os.scandir(path) as entries:
                for entry in entries:
                    if entry.is_file():
                        result.append(Path(entry.path))
        else:
            result.append(path)
    return result


def sort_paths(paths: Iterable[Path]) -> List[Path]:
    return sorted(paths)


def collect_inputs(paths: Iterable[PathArg]) -> List[Path]:
    expanded = expand_directories(paths)
    supported = keep_supported(expanded)
    if expanded and not supported:
        raise NoSupportedInputs("No supported images provided!")
    return sort_paths(Path(p) for p in supported)

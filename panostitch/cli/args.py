# panostitch/cli/args.py
# Top-level parse: dispatch -> expand/filter/sort -> validate.

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from panostitch.cli.dispatch import parse_args_raw
from panostitch.cli.paths import NoSupportedInputs, collect_inputs
from panostitch.cli.validation import Violation, ViolationKind, validate_args
from panostitch.models.args import Args
from panostitch.models.limits import DEFAULT_LIMITS, Limits
from panostitch.utils.logging_utils import log_violation

log = logging.getLogger("panostitch.cli")


@dataclass(frozen=True)
class ParseResult:
    args: Optional[Args] = None
    violation: Optional[Violation] = None

    @property
    def ok(self) -> bool:
        return self.args is not None


def try_parse_args(argv: Iterable[str], limits: Limits = DEFAULT_LIMITS) -> ParseResult:
    """Parse without logging failures; the result carries either Args or the reason."""
    args = parse_args_raw(argv)
    try:
        inputs = collect_inputs(args.input_paths)
    except NoSupportedInputs as e:
        return ParseResult(violation=Violation(ViolationKind.NO_SUPPORTED_INPUTS, str(e)))
    except OSError as e:
        return ParseResult(violation=Violation(ViolationKind.FILESYSTEM_ERROR, f"Error parsing arguments: {e}"))
    args = replace(args, input_paths=tuple(inputs))

    violation = validate_args(args, limits)
    if violation is not None:
        return ParseResult(violation=violation)
    return ParseResult(args=args)


def parse_args(argv: Iterable[str], limits: Limits = DEFAULT_LIMITS) -> Optional[Args]:
    result = try_parse_args(argv, limits)
    if not result.ok:
        log_violation(log, result.violation)
    return result.args

import re
from dataclasses import dataclass
from typing import Optional, List, Callable, Pattern

from cargobay.common.config.logging_config import get_logger
from cargobay.common.exceptions.build_exceptions import (
    BuildException,
    TargetNotFoundError,
    PackageNotFoundError,
    ToolchainFailedError,
)


logger = get_logger(__name__)

ErrorFactory = Callable[[str, str, Optional[List[str]]], BuildException]


@dataclass(frozen=True)
class ErrorPattern:
    name: str
    pattern: Pattern
    group: str
    build_error: ErrorFactory


class BuildErrorClassifier:
    """Turn cargo's stderr into a typed build error.

    The patterns are tied to cargo's exact error wording. If a cargo release
    rewords these messages the failure falls through to ToolchainFailedError,
    which still carries the full stderr.
    """

    DEFAULT_PATTERNS = [
        ErrorPattern(
            "target_not_found",
            re.compile(r"error: no \w+ target named `(?P<name>.*?)`"),
            "name",
            lambda name, stderr, command: TargetNotFoundError(name, stderr=stderr, command=command),
        ),
        ErrorPattern(
            "package_not_found",
            re.compile(r"error: package ID specification `(?P<spec>.*?)` did not match any packages"),
            "spec",
            lambda spec, stderr, command: PackageNotFoundError(spec, stderr=stderr, command=command),
        ),
    ]

    def __init__(self, patterns: Optional[List[ErrorPattern]] = None):
        self._patterns = list(patterns) if patterns is not None else self.DEFAULT_PATTERNS.copy()

    @property
    def patterns(self) -> List[ErrorPattern]:
        return list(self._patterns)

    def classify(
        self,
        stderr: str,
        exit_code: Optional[int] = None,
        command: Optional[List[str]] = None,
    ) -> BuildException:
        for pattern in self._patterns:
            match = pattern.pattern.search(stderr)
            if match:
                logger.debug(f"Cargo stderr matched {pattern.name}")
                return pattern.build_error(match.group(pattern.group), stderr, command)

        return ToolchainFailedError(stderr, exit_code=exit_code, command=command)

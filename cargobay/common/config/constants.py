from enum import Enum
from typing import Final


# Ensure the rendered field of JSON messages contains embedded ANSI color
# codes for respecting rustc's default color scheme.
MESSAGE_FORMAT_JSON_ANSI: Final[str] = "json-diagnostic-rendered-ansi"

ANY_PACKAGE_REPR: Final[str] = "*"
ALL_INTEGRATION_TESTS: Final[str] = "*"

DEFAULT_STREAM_LIMIT_BYTES: Final[int] = 16 * 1024 * 1024
MIN_STREAM_LIMIT_BYTES: Final[int] = 64 * 1024


class Subcommand(str, Enum):
    BUILD = "build"
    TEST = "test"


class MessageReason(str, Enum):
    COMPILER_MESSAGE = "compiler-message"
    COMPILER_ARTIFACT = "compiler-artifact"


class ArtifactFilter(str, Enum):
    EXECUTABLE = "executable"
    TEST = "test"


class PackageSelector(str, Enum):
    ANY = "any"
    NAME = "name"
    ID = "id"


class NameMatch(str, Enum):
    EXACT = "exact"
    SUBSTRING = "substring"
    ANY = "any"


class TestTargetType(str, Enum):
    __test__ = False

    LIB = "lib"
    BIN = "bin"
    BINS = "bins"
    INTEGRATION = "integration"
    INTEGRATIONS = "integrations"
    EXAMPLE = "example"
    EXAMPLES = "examples"
    DOC = "doc"
    ALL = "all"


class TestUnitKind(str, Enum):
    __test__ = False

    TEST = "test"
    BENCH = "bench"

    def __str__(self) -> str:
        return self.value


# libtest `--list --format=terse` kind column
LISTING_KINDS: Final[dict] = {
    "test": TestUnitKind.TEST,
    "benchmark": TestUnitKind.BENCH,
}

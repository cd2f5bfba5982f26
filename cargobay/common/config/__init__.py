from cargobay.common.config.settings import Settings, get_settings
from cargobay.common.config.logging_config import (
    setup_logging,
    setup_logging_from_settings,
    get_logger,
    get_build_logger,
    get_discovery_logger,
)
from cargobay.common.config.constants import (
    ArtifactFilter,
    MessageReason,
    NameMatch,
    PackageSelector,
    Subcommand,
    TestTargetType,
    TestUnitKind,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "setup_logging_from_settings",
    "get_logger",
    "get_build_logger",
    "get_discovery_logger",
    "ArtifactFilter",
    "MessageReason",
    "NameMatch",
    "PackageSelector",
    "Subcommand",
    "TestTargetType",
    "TestUnitKind",
]

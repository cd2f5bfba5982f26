from pathlib import Path
from typing import Optional, List, Tuple, Any

from pydantic import Field, model_validator

from cargobay.common.dto.base import FrozenDTO
from cargobay.common.config.constants import (
    ANY_PACKAGE_REPR,
    ALL_INTEGRATION_TESTS,
    NameMatch,
    PackageSelector,
    TestTargetType,
)
from cargobay.common.config.logging_config import get_logger


logger = get_logger(__name__)


class PackageSpec(FrozenDTO):
    """Describe a package (i.e. the ``--package`` flag)."""

    selector: PackageSelector = PackageSelector.ANY
    value: Optional[str] = None

    @model_validator(mode="after")
    def validate_value(self) -> "PackageSpec":
        if self.selector == PackageSelector.ANY:
            if self.value is not None:
                raise ValueError("Package spec `any` does not take a value")
        elif not self.value:
            raise ValueError(f"Package spec `{self.selector.value}` requires a value")
        return self

    @classmethod
    def any(cls) -> "PackageSpec":
        return cls(selector=PackageSelector.ANY)

    @classmethod
    def name(cls, name: str) -> "PackageSpec":
        return cls(selector=PackageSelector.NAME, value=name)

    @classmethod
    def id(cls, package_id: str) -> "PackageSpec":
        """The full ID of a package in the workspace, as reported on artifacts."""
        return cls(selector=PackageSelector.ID, value=package_id)

    @classmethod
    def from_package_id(cls, package_id: str) -> "PackageSpec":
        return cls.id(package_id)

    def as_repr(self) -> str:
        if self.selector == PackageSelector.ANY:
            return ANY_PACKAGE_REPR
        return self.value

    def __str__(self) -> str:
        return self.as_repr()


class FeatureSpec(FrozenDTO):
    """Describe a configuration of feature flags."""

    all_features: bool = False
    include_default: bool = True
    features: Tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def validate_all(self) -> "FeatureSpec":
        if self.all_features and self.features:
            raise ValueError("--all-features cannot be combined with a feature list")
        return self

    @classmethod
    def new(cls, features: List[str]) -> "FeatureSpec":
        """``features`` on top of the default features (``--features ...``)."""
        return cls(features=tuple(features))

    @classmethod
    def new_no_default(cls, features: List[str]) -> "FeatureSpec":
        """Only ``features`` (``--features ... --no-default-features``)."""
        return cls(include_default=False, features=tuple(features))

    @classmethod
    def all(cls) -> "FeatureSpec":
        return cls(all_features=True)

    @classmethod
    def default_only(cls) -> "FeatureSpec":
        return cls.new([])

    @classmethod
    def none(cls) -> "FeatureSpec":
        return cls.new_no_default([])

    def with_feature(self, feature: str) -> "FeatureSpec":
        if self.all_features:
            logger.info("Ignoring feature append as set to all")
            return self
        return self.model_copy(update={"features": self.features + (feature,)})

    def to_args(self) -> List[str]:
        if self.all_features:
            return ["--all-features"]

        args: List[str] = []
        if self.features:
            args.extend(["--features", ",".join(self.features)])
        if not self.include_default:
            args.append("--no-default-features")
        return args


class BuildContext(FrozenDTO):
    workspace: Optional[Path] = None
    target_dir: Optional[Path] = None
    package: PackageSpec = Field(default_factory=PackageSpec.any)
    features: Optional[FeatureSpec] = None
    release: bool = False


class ExecutableRequest(FrozenDTO):
    name: str
    is_example: bool = False
    context: BuildContext = Field(default_factory=BuildContext)

    @classmethod
    def bin(cls, name: str, **context: Any) -> "ExecutableRequest":
        """Compile a binary. The default binary has the name of the crate."""
        return cls(name=name, is_example=False, context=BuildContext(**context))

    @classmethod
    def example(cls, name: str, **context: Any) -> "ExecutableRequest":
        return cls(name=name, is_example=True, context=BuildContext(**context))

    @property
    def kind(self) -> str:
        return "example" if self.is_example else "bin"

    def selector_args(self) -> List[str]:
        return [f"--{self.kind}", self.name]


class NameSpec(FrozenDTO):
    """Select tests and benches by name."""

    match: NameMatch = NameMatch.ANY
    value: Optional[str] = None

    @model_validator(mode="after")
    def validate_value(self) -> "NameSpec":
        if self.match == NameMatch.ANY:
            if self.value is not None:
                raise ValueError("Name spec `any` does not take a value")
        elif self.value is None:
            raise ValueError(f"Name spec `{self.match.value}` requires a value")
        return self

    @classmethod
    def exact(cls, name: str) -> "NameSpec":
        """Only exact matches (``cargo test -- --exact``)."""
        return cls(match=NameMatch.EXACT, value=name)

    @classmethod
    def substring(cls, name: str) -> "NameSpec":
        """Anything containing ``name``, the default behaviour of ``cargo test``."""
        return cls(match=NameMatch.SUBSTRING, value=name)

    @classmethod
    def any(cls) -> "NameSpec":
        return cls(match=NameMatch.ANY)

    def run_args(self) -> List[str]:
        if self.match == NameMatch.EXACT:
            return self.exact_run_args(self.value)
        if self.match == NameMatch.SUBSTRING:
            return [self.value]
        return []

    @staticmethod
    def exact_run_args(name: str) -> List[str]:
        return ["--exact", name]


_NAMED_TYPES = {TestTargetType.BIN, TestTargetType.INTEGRATION, TestTargetType.EXAMPLE}


class TypeSpec(FrozenDTO):
    """Select the kind of test artifact to build. Names can contain globs."""

    target_type: TestTargetType = TestTargetType.ALL
    name: Optional[str] = None

    @model_validator(mode="after")
    def validate_name(self) -> "TypeSpec":
        if self.target_type in _NAMED_TYPES:
            if not self.name:
                raise ValueError(f"Type spec `{self.target_type.value}` requires a name")
        elif self.name is not None:
            raise ValueError(f"Type spec `{self.target_type.value}` does not take a name")
        return self

    @classmethod
    def lib(cls) -> "TypeSpec":
        return cls(target_type=TestTargetType.LIB)

    @classmethod
    def bin(cls, name: str) -> "TypeSpec":
        return cls(target_type=TestTargetType.BIN, name=name)

    @classmethod
    def bins(cls) -> "TypeSpec":
        return cls(target_type=TestTargetType.BINS)

    @classmethod
    def integration(cls, name: str) -> "TypeSpec":
        return cls(target_type=TestTargetType.INTEGRATION, name=name)

    @classmethod
    def integrations(cls) -> "TypeSpec":
        return cls(target_type=TestTargetType.INTEGRATIONS)

    @classmethod
    def example(cls, name: str) -> "TypeSpec":
        return cls(target_type=TestTargetType.EXAMPLE, name=name)

    @classmethod
    def examples(cls) -> "TypeSpec":
        return cls(target_type=TestTargetType.EXAMPLES)

    @classmethod
    def doc(cls) -> "TypeSpec":
        """Doctests. cargo refuses ``--doc`` together with ``--no-run``, so
        compiling this type spec fails with ToolchainFailedError.
        """
        return cls(target_type=TestTargetType.DOC)

    @classmethod
    def all(cls) -> "TypeSpec":
        return cls(target_type=TestTargetType.ALL)

    def to_args(self) -> List[str]:
        target_type = self.target_type
        if target_type == TestTargetType.LIB:
            return ["--lib"]
        if target_type == TestTargetType.BIN:
            return ["--bin", self.name]
        if target_type == TestTargetType.BINS:
            return ["--bins"]
        if target_type == TestTargetType.INTEGRATION:
            return ["--test", self.name]
        if target_type == TestTargetType.INTEGRATIONS:
            return ["--test", ALL_INTEGRATION_TESTS]
        if target_type == TestTargetType.DOC:
            return ["--doc"]
        if target_type == TestTargetType.EXAMPLE:
            return ["--example", self.name]
        if target_type == TestTargetType.EXAMPLES:
            return ["--examples"]
        return []

    def describe(self) -> str:
        if self.name:
            return f"{self.target_type.value}:{self.name}"
        return self.target_type.value


class TestRequest(FrozenDTO):
    __test__ = False

    name: NameSpec = Field(default_factory=NameSpec.any)
    test_type: TypeSpec = Field(default_factory=TypeSpec.all)
    context: BuildContext = Field(default_factory=BuildContext)

    @classmethod
    def build(cls, name: NameSpec, test_type: TypeSpec, **context: Any) -> "TestRequest":
        return cls(name=name, test_type=test_type, context=BuildContext(**context))

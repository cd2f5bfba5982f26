from typing import List

from pydantic import Field, computed_field

from cargobay.common.dto.base import FrozenDTO
from cargobay.common.dto.artifact import ExecutableArtifact
from cargobay.common.dto.specs import NameSpec
from cargobay.common.config.constants import TestUnitKind


class TestUnit(FrozenDTO):
    """A test or bench in a compiled artifact."""

    __test__ = False

    name: str
    kind: TestUnitKind

    def run_args(self) -> List[str]:
        """Arguments to pass to the test artifact to run only this test or bench."""
        return NameSpec.exact_run_args(self.name)


class TestArtifactResult(FrozenDTO):
    __test__ = False

    artifact: ExecutableArtifact
    tests: List[TestUnit] = Field(default_factory=list)
    name_spec: NameSpec

    @computed_field
    @property
    def test_count(self) -> int:
        return sum(1 for t in self.tests if t.kind == TestUnitKind.TEST)

    @computed_field
    @property
    def bench_count(self) -> int:
        return sum(1 for t in self.tests if t.kind == TestUnitKind.BENCH)

    def run_args(self) -> List[str]:
        """Arguments to pass to the test artifact to run only the matched tests."""
        return self.name_spec.run_args()

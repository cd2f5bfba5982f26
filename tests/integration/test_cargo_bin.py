"""Build bins and examples of the hello_world fixture crate with a real cargo."""

from pathlib import Path

import pytest

from cargobay import BinaryCompiler, DiagnosticChannel
from cargobay.common.dto.specs import ExecutableRequest, FeatureSpec, PackageSpec
from cargobay.common.exceptions import (
    PackageNotFoundError,
    TargetNotFoundError,
    ToolchainFailedError,
)


pytestmark = pytest.mark.integration


@pytest.fixture
def compiler(cargo_settings) -> BinaryCompiler:
    return BinaryCompiler(cargo_settings)


async def test_bin_main(compiler: BinaryCompiler, context: dict) -> None:
    artifact = await compiler.compile(ExecutableRequest.bin("hello_world", **context))

    assert artifact.target.name == "hello_world"
    assert artifact.target.src_path.as_posix().endswith("src/main.rs")
    assert artifact.executable.exists()


async def test_bin_2(compiler: BinaryCompiler, context: dict) -> None:
    artifact = await compiler.compile(ExecutableRequest.bin("bin_2", **context))

    assert artifact.target.name == "bin_2"
    assert artifact.target.src_path.as_posix().endswith("src/bin/bin_2.rs")


async def test_example(compiler: BinaryCompiler, context: dict) -> None:
    artifact = await compiler.compile(ExecutableRequest.example("example_1", **context))

    assert artifact.target.name == "example_1"
    assert artifact.target.src_path.as_posix().endswith("examples/example_1.rs")


async def test_ws_member(compiler: BinaryCompiler, context: dict) -> None:
    artifact = await compiler.compile(
        ExecutableRequest.bin("ws_member", package=PackageSpec.name("ws_member"), **context)
    )

    assert artifact.target.name == "ws_member"
    assert artifact.target.src_path.as_posix().endswith("ws_member/src/main.rs")


async def test_features(compiler: BinaryCompiler, context: dict) -> None:
    artifact = await compiler.compile(
        ExecutableRequest.bin(
            "hello_world", features=FeatureSpec.new(["non_default_feature"]), **context
        )
    )

    assert artifact.features == ["default", "default_feature", "non_default_feature"]


async def test_default_features_only(compiler: BinaryCompiler, context: dict) -> None:
    artifact = await compiler.compile(
        ExecutableRequest.bin("hello_world", features=FeatureSpec.default_only(), **context)
    )

    assert artifact.features == ["default", "default_feature"]


async def test_no_default_features(compiler: BinaryCompiler, context: dict) -> None:
    artifact = await compiler.compile(
        ExecutableRequest.bin("hello_world", features=FeatureSpec.none(), **context)
    )

    assert artifact.features == []


@pytest.mark.parametrize(
    ("release", "debug_build"),
    [({}, True), ({"release": False}, True), ({"release": True}, False)],
    ids=["default", "disabled", "enabled"],
)
async def test_release(compiler: BinaryCompiler, context: dict, release: dict, debug_build: bool) -> None:
    artifact = await compiler.compile(ExecutableRequest.bin("hello_world", **release, **context))

    assert (artifact.profile.opt_level == "0") is debug_build


async def test_diagnostics_channel_is_optional(compiler: BinaryCompiler, context: dict) -> None:
    channel = DiagnosticChannel()

    await compiler.compile(ExecutableRequest.bin("hello_world", **context), diagnostics=channel)

    assert channel.published == len(channel.drain())


async def test_bin_nonexistent(compiler: BinaryCompiler, context: dict) -> None:
    with pytest.raises(TargetNotFoundError):
        await compiler.compile(ExecutableRequest.bin("bin_that_doesnt_exist", **context))


async def test_example_nonexistent(compiler: BinaryCompiler, context: dict) -> None:
    with pytest.raises(TargetNotFoundError):
        await compiler.compile(ExecutableRequest.example("example_does_not_exist", **context))


async def test_nonexistent_package(compiler: BinaryCompiler, context: dict) -> None:
    with pytest.raises(PackageNotFoundError):
        await compiler.compile(
            ExecutableRequest.bin(
                "bin_that_doesnt_exist",
                package=PackageSpec.name("package_that_doesnt_exist"),
                **context,
            )
        )


async def test_outside_any_workspace(compiler: BinaryCompiler, tmp_path: Path) -> None:
    with pytest.raises(ToolchainFailedError) as exc_info:
        await compiler.compile(ExecutableRequest.bin("hello_world", workspace=tmp_path))

    assert "could not find `Cargo.toml`" in exc_info.value.stderr


async def test_defaults_to_current_directory(
    compiler: BinaryCompiler, hello_world: Path, target_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(hello_world)

    artifact = await compiler.compile(ExecutableRequest.bin("hello_world", target_dir=target_dir))

    assert artifact.target.src_path.as_posix().endswith("src/main.rs")

import io
from pathlib import Path

import pytest

from zigprep.config import (
    DEFAULT_ARCHIVE_HOST,
    TOOLCHAIN_VERSION,
    BuildConfig,
    Version,
    binary_name,
    emit_rerun_directives,
)
from zigprep.errors import ConfigurationError


def test_from_env_without_opt_in_is_disabled_and_unvalidated(tmp_path: Path) -> None:
    config = BuildConfig.from_env({}, cwd=tmp_path)

    assert config.enabled is False
    assert config.docs_only is False
    assert config.out_dir is None
    assert config.target == ""
    assert config.source_dir == tmp_path / "zig-bootstrap"


def test_from_env_reads_build_inputs(tmp_path: Path) -> None:
    environ = {
        "DO_IT": "1",
        "TARGET": "x86_64-pc-windows-gnu",
        "OUT_DIR": str(tmp_path / "out"),
        "CARGO_CFG_WINDOWS": "",
        "CARGO_MANIFEST_DIR": str(tmp_path / "crate"),
    }

    config = BuildConfig.from_env(environ)

    assert config.enabled is True
    assert config.docs_only is False
    assert config.target == "x86_64-pc-windows-gnu"
    assert config.out_dir == tmp_path / "out"
    assert config.windows is True
    assert config.binary_name == "zig.exe"
    assert config.source_dir == tmp_path / "crate" / "zig-bootstrap"
    assert config.version == TOOLCHAIN_VERSION
    assert config.archive_host == DEFAULT_ARCHIVE_HOST


def test_from_env_requires_target_when_building(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        BuildConfig.from_env({"DO_IT": "", "OUT_DIR": str(tmp_path)})

    assert excinfo.value.context["variable"] == "TARGET"


def test_from_env_requires_out_dir_when_enabled() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        BuildConfig.from_env({"DO_IT": "", "DOCS_RS": "1"})

    assert excinfo.value.context["variable"] == "OUT_DIR"


def test_docs_mode_does_not_need_a_target(tmp_path: Path) -> None:
    config = BuildConfig.from_env({"DO_IT": "", "DOCS_RS": "1", "OUT_DIR": str(tmp_path)})

    assert config.docs_only is True
    assert config.target == ""


def test_version_parse_and_render() -> None:
    version = Version.parse("0.14.0")

    assert version == Version(0, 14, 0)
    assert str(version) == "0.14.0"


@pytest.mark.parametrize("text", ["0.14", "0.14.0.1", "v0.14.0", "0.-1.0", "a.b.c"])
def test_version_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(ConfigurationError):
        Version.parse(text)


def test_version_rejects_negative_fields() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        Version(0, -1, 0)

    assert excinfo.value.context["field"] == "minor"


def test_binary_name_follows_os_convention() -> None:
    assert binary_name(windows=False) == "zig"
    assert binary_name(windows=True) == "zig.exe"


def test_rerun_directives_name_the_opt_in_variable() -> None:
    stream = io.StringIO()
    emit_rerun_directives(stream)

    assert stream.getvalue() == "cargo:rerun-if-env-changed=DO_IT\n"

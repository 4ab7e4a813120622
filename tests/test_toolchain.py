import platform

import pytest

from fuelup.toolchain import Toolchain


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


@pytest.fixture
def linux_x86(monkeypatch):
    monkeypatch.setattr(platform, "machine", lambda: "x86_64")
    monkeypatch.setattr(platform, "system", lambda: "Linux")


def test_new_appends_host_target(home, linux_x86):
    toolchain = Toolchain.new("latest")
    assert toolchain.name == "latest-x86_64-unknown-linux-gnu"
    assert toolchain.path == home / ".fuelup" / "toolchains" / toolchain.name
    assert toolchain.bin_path == toolchain.path / "bin"


def test_from_path_layout(home):
    toolchain = Toolchain.from_path("my-toolchain")
    assert toolchain.name == "my-toolchain"
    assert toolchain.path == home / ".fuelup" / "toolchains" / "my-toolchain"
    assert toolchain.bin_path == toolchain.path / "bin"


def test_all_without_toolchains_dir(home):
    assert Toolchain.all() == []


def test_all_lists_only_directories(home):
    root = home / ".fuelup" / "toolchains"
    (root / "nightly-x86_64-apple-darwin").mkdir(parents=True)
    (root / "my-toolchain").mkdir()
    (root / "stray-file").write_text("x")
    assert Toolchain.all() == ["my-toolchain", "nightly-x86_64-apple-darwin"]


def test_from_settings_reads_default(home):
    fuelup = home / ".fuelup"
    fuelup.mkdir()
    (fuelup / "settings.toml").write_text('default_toolchain = "latest-x86_64-apple-darwin"')
    toolchain = Toolchain.from_settings()
    assert toolchain == Toolchain.from_path("latest-x86_64-apple-darwin")


def test_from_settings_without_file(home):
    with pytest.raises(LookupError, match="No default toolchain detected"):
        Toolchain.from_settings()
    assert not (home / ".fuelup" / "settings.toml").exists()


def test_from_settings_without_default(home):
    fuelup = home / ".fuelup"
    fuelup.mkdir()
    (fuelup / "settings.toml").write_text("")
    with pytest.raises(LookupError, match="Please install or create a toolchain first"):
        Toolchain.from_settings()


@pytest.mark.parametrize(
    "name, expected",
    [
        ("latest-x86_64-apple-darwin", True),
        ("nightly-2022-08-30-x86_64-unknown-linux-gnu", True),
        ("testnet", True),
        ("mainnet-aarch64-apple-darwin", True),
        ("stable", True),
        ("ignition-x", True),
        ("my-toolchain", False),
        ("custom", False),
    ],
)
def test_is_distributed(home, name, expected):
    assert Toolchain.from_path(name).is_distributed() is expected


def test_exists(home):
    toolchain = Toolchain.from_path("my-toolchain")
    assert not toolchain.exists()
    toolchain.bin_path.mkdir(parents=True)
    assert toolchain.exists()


def test_exists_false_for_file(home):
    toolchain = Toolchain.from_path("my-toolchain")
    toolchain.path.parent.mkdir(parents=True)
    toolchain.path.write_text("")
    assert not toolchain.exists()


def test_has_executables(home):
    toolchain = Toolchain.from_path("my-toolchain")
    toolchain.bin_path.mkdir(parents=True)
    for name in ("fuel-core", "fuel-core-keygen"):
        (toolchain.bin_path / name).write_text("")
    assert toolchain.has_executables(["fuel-core", "fuel-core-keygen"])
    assert not toolchain.has_executables(["fuel-core", "forc"])


def test_has_executables_ignores_directories(home):
    toolchain = Toolchain.from_path("my-toolchain")
    (toolchain.bin_path / "forc").mkdir(parents=True)
    assert not toolchain.has_executables(["forc"])


def test_remove_executables(home):
    toolchain = Toolchain.from_path("my-toolchain")
    toolchain.bin_path.mkdir(parents=True)
    for name in ("forc", "forc-fmt", "fuel-core"):
        (toolchain.bin_path / name).write_text("")
    toolchain.remove_executables(["forc", "forc-fmt"])
    assert sorted(p.name for p in toolchain.bin_path.iterdir()) == ["fuel-core"]


def test_remove_missing_executable_raises(home):
    toolchain = Toolchain.from_path("my-toolchain")
    toolchain.bin_path.mkdir(parents=True)
    with pytest.raises(OSError, match="failed to remove executable 'forc'"):
        toolchain.remove_executables(["forc"])
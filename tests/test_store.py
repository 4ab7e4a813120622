import semver

from fuelup.store import Store, component_dirname


def _set_home(monkeypatch, home):
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))


def test_component_dirname_matches_store_layout():
    version = semver.Version.parse("0.15.1")
    assert component_dirname("fuel-core", version) == "fuel-core-0.15.1"


def test_from_env_creates_store_dir(tmp_path, monkeypatch):
    _set_home(monkeypatch, tmp_path)
    store = Store.from_env()
    assert store.path == tmp_path / ".fuelup" / "store"
    assert store.path.is_dir()


def test_from_env_is_idempotent(tmp_path, monkeypatch):
    _set_home(monkeypatch, tmp_path)
    first = Store.from_env()
    second = Store.from_env()
    assert first == second


def test_component_dir_path_is_inside_store(tmp_path):
    store = Store(tmp_path)
    version = semver.Version.parse("0.33.0")
    path = store.component_dir_path("forc", version)
    assert path.parent == tmp_path
    assert path.name == component_dirname("forc", version)


def test_has_component_follows_directory(tmp_path):
    store = Store(tmp_path)
    version = semver.Version.parse("0.17.0")
    assert not store.has_component("fuel-core", version)
    store.component_dir_path("fuel-core", version).mkdir()
    assert store.has_component("fuel-core", version)
    assert not store.has_component("fuel-core", semver.Version.parse("0.17.1"))
    assert not store.has_component("forc", version)
import pytest

from fuelup.settings import Settings, SettingsFile


def test_parse_settings(tmp_path):
    settings_path = tmp_path / "settings-example.toml"
    settings_path.write_text('default_toolchain = "latest-x86_64-apple-darwin"\n')
    settings = Settings.parse(settings_path.read_text())
    assert settings.default_toolchain == "latest-x86_64-apple-darwin"


def test_write_settings(tmp_path):
    settings_path = tmp_path / "settings-example-dst.toml"
    settings_file = SettingsFile(settings_path)
    new_default_toolchain = "new-default-toolchain"

    with settings_file.edit() as s:
        s.default_toolchain = new_default_toolchain

    settings = Settings.parse(settings_path.read_text())
    assert settings.default_toolchain == new_default_toolchain


def test_settings_into_string():
    settings = Settings(default_toolchain="yet-another-default-toolchain")
    assert settings.to_toml() == 'default_toolchain = "yet-another-default-toolchain"\n'


def test_empty_settings_round_trip():
    assert Settings.parse(Settings().to_toml()) == Settings()


def test_parse_rejects_wrong_type():
    with pytest.raises(ValueError):
        Settings.parse("default_toolchain = 3\n")


def test_parse_rejects_bad_toml():
    with pytest.raises(ValueError):
        Settings.parse("default_toolchain = \n")


def test_read_missing_file_creates_defaults(tmp_path):
    settings_path = tmp_path / "nested" / "settings.toml"
    settings = SettingsFile(settings_path).read()
    assert settings.default_toolchain is None
    assert settings_path.is_file()


def test_edit_not_saved_on_error(tmp_path):
    settings_path = tmp_path / "settings.toml"
    settings_path.write_text('default_toolchain = "old"\n')
    settings_file = SettingsFile(settings_path)
    with pytest.raises(RuntimeError):
        with settings_file.edit() as s:
            s.default_toolchain = "new"
            raise RuntimeError("boom")
    assert Settings.parse(settings_path.read_text()).default_toolchain == "old"


def test_read_returns_copy(tmp_path):
    settings_file = SettingsFile(tmp_path / "settings.toml")
    copy = settings_file.read()
    copy.default_toolchain = "changed"
    assert settings_file.read().default_toolchain is None
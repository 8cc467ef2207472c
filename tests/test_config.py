import os
from unittest import mock

import pytest

from cdkpw.config import (
    Config,
    ConfigError,
    Profile,
    Verbose,
    get_config_file,
    load_config,
)


@pytest.fixture
def matching_config():
    return Config(
        profiles=[
            Profile(match="Prod", profile="prod_admin"),
            Profile(match="Dev", profile="dev_admin"),
            Profile(match="Secure", profile="secure_admin"),
            Profile(match="Api", profile="api_admin"),
        ],
        cdk_location="/usr/local/bin/cdk",
    )


@pytest.mark.parametrize(
    "stack_arg, expected",
    [
        ("ProdAppStack", "prod_admin"),
        ("DevWorkerStack", "dev_admin"),
        ("SecureZoneEKS", "secure_admin"),
        ("CustomerApiStack", "api_admin"),
        ("StagingStack", None),
        ("", None),
    ],
)
def test_find_profile_matching(matching_config, stack_arg, expected):
    assert matching_config.find_profile(stack_arg) == expected


def test_cdk_location(matching_config):
    assert matching_config.cdk_location == "/usr/local/bin/cdk"


def test_find_profile_verbose_prints(capsys):
    cfg = Config(profiles=[Profile(match="Backup", profile="backup_admin")], verbose=Verbose.INFO)
    assert cfg.find_profile("BackupStack") == "backup_admin"
    assert "cdkpw: Using profile backup_admin for stack BackupStack\n" in capsys.readouterr().out


def test_find_profile_silent(capsys):
    cfg = Config(profiles=[Profile(match="Backup", profile="backup_admin")], verbose=Verbose.SILENT)
    assert cfg.find_profile("BackupStack") == "backup_admin"
    assert capsys.readouterr().out == ""


def test_get_config_file_uses_env(monkeypatch):
    monkeypatch.setenv("CDKPW_CONFIG", "/foo/config.yml")
    assert get_config_file() == "/foo/config.yml"


def test_get_config_file_falls_back_to_home(monkeypatch, tmp_path):
    monkeypatch.delenv("CDKPW_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_config_file() == os.path.join(str(tmp_path), ".cdk", ".cdkpw.yml")


def test_load_valid_config(monkeypatch, tmp_path):
    content = """
profiles:
  - match: Prod
    profile: prod_admin
  - match: Dev
    profile: dev_admin
"""
    path = tmp_path / "config.yml"
    path.write_text(content)
    monkeypatch.setenv("CDKPW_CONFIG", str(path))

    config = load_config()
    assert len(config.profiles) == 2
    assert config.profiles[0].match == "Prod"
    assert config.profiles[0].profile == "prod_admin"
    assert config.profiles[1].match == "Dev"
    assert config.profiles[1].profile == "dev_admin"
    assert config.cdk_location == "cdk"
    assert config.verbose == Verbose.SILENT


def test_load_config_reads_location_and_verbose(monkeypatch, tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("cdkLocation: /usr/local/bin/cdk\nverbose: 2\n")
    monkeypatch.setenv("CDKPW_CONFIG", str(path))

    config = load_config()
    assert config.cdk_location == "/usr/local/bin/cdk"
    assert config.verbose == Verbose.DEBUG
    assert config.profiles == []


def test_load_invalid_config(monkeypatch, tmp_path):
    content = """
profiles:
  - match: Prod
profile: prod_admin
  \t\t\t- match: Dev
    profile: dev_admin
"""
    path = tmp_path / "config.yml"
    path.write_text(content)
    monkeypatch.setenv("CDKPW_CONFIG", str(path))

    with pytest.raises(ConfigError, match="invalid YAML in"):
        load_config()


def test_get_config_file_home_error(monkeypatch):
    monkeypatch.delenv("CDKPW_CONFIG", raising=False)
    with mock.patch("cdkpw.config.Path.home", side_effect=RuntimeError("mocked home dir error")):
        with pytest.raises(ConfigError, match="mocked home dir error"):
            get_config_file()
        with pytest.raises(ConfigError, match="mocked home dir error"):
            load_config()


def test_load_config_read_error(monkeypatch):
    monkeypatch.setenv("CDKPW_CONFIG", "/does/not/exist")
    with pytest.raises(ConfigError, match="could not read config file at"):
        load_config()
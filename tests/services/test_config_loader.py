import pytest

from hyperlanesetup.errors import SetupError
from hyperlanesetup.services.config_loader import ConfigLoader


def test_config_loader_loads_yaml_mapping(tmp_path):
    config_file = tmp_path / ".hyperlanesetup.yml"
    config_file.write_text(
        "db_dir: /srv/hyperlane\nnode_major_version: 22\nmax_key_attempts: 3\n",
        encoding="utf-8",
    )

    loader = ConfigLoader()
    loaded = loader.load(str(config_file))

    assert loaded["db_dir"] == "/srv/hyperlane"
    assert loaded["node_major_version"] == "22"
    assert loaded["max_key_attempts"] == 3


def test_config_loader_rejects_unknown_keys(tmp_path):
    config_file = tmp_path / ".hyperlanesetup.yml"
    config_file.write_text("unknown_key: true\n", encoding="utf-8")

    loader = ConfigLoader()

    with pytest.raises(SetupError, match="Unknown configuration keys"):
        loader.load(str(config_file))


def test_config_loader_rejects_non_mapping(tmp_path):
    config_file = tmp_path / ".hyperlanesetup.yml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(SetupError, match="YAML mapping"):
        ConfigLoader().load(str(config_file))


def test_config_loader_missing_file(tmp_path):
    with pytest.raises(SetupError, match="Config file not found"):
        ConfigLoader().load(str(tmp_path / "missing.yml"))


@pytest.mark.parametrize("key", ["log_file", "db_dir", "image_tag", "max_key_attempts", "verbose"])
def test_config_loader_rejects_null_values(tmp_path, key):
    config_file = tmp_path / ".hyperlanesetup.yml"
    config_file.write_text(f"{key}:\n", encoding="utf-8")

    with pytest.raises(SetupError, match=f"'{key}' must have a value"):
        ConfigLoader().load(str(config_file))


@pytest.mark.parametrize(
    "content",
    [
        "reorg_period: soon\n",
        "reorg_period: true\n",
        "max_key_attempts: 2.5\n",
        "download_timeout: fast\n",
        "verbose: 'yes'\n",
        "log_file: ['/var/log/a.log']\n",
        "container_name: ''\n",
    ],
)
def test_config_loader_rejects_wrong_types(tmp_path, content):
    config_file = tmp_path / ".hyperlanesetup.yml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(SetupError, match="must be a"):
        ConfigLoader().load(str(config_file))


def test_config_loader_normalizes_values_to_context_types(tmp_path):
    config_file = tmp_path / ".hyperlanesetup.yml"
    config_file.write_text(
        "nvm_dir:\ncommand_timeout:\ndownload_timeout: 45\nimage_tag: 2\nverbose: true\n",
        encoding="utf-8",
    )

    loaded = ConfigLoader().load(str(config_file))

    assert loaded == {
        "nvm_dir": None,
        "command_timeout": None,
        "download_timeout": 45.0,
        "image_tag": "2",
        "verbose": True,
    }


def test_config_loader_does_not_expose_package_groups():
    assert "base_package_groups" not in ConfigLoader.SUPPORTED_KEYS
    assert "log_file" in ConfigLoader.SUPPORTED_KEYS

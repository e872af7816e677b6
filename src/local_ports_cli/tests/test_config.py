"""
Tests for configuration management
"""
import pytest
from unittest.mock import patch

from local_ports_cli.lib.config import Config, ConfigError, DEFAULT_TIMEOUT, parse_timeout

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration overrides from the environment"""
    for name in ("LOCAL_PORTS_SOURCE", "LOCAL_PORTS_SS_BINARY", "LOCAL_PORTS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

@pytest.fixture
def config_file(tmp_path):
    """Path for a temporary config file"""
    return tmp_path / "config.yaml"

def test_load_missing_file_uses_defaults(config_file):
    """Test defaults when no file exists"""
    config = Config.load(config_file)
    assert config.source == "ss"
    assert config.ss_binary == "ss"
    assert config.timeout == DEFAULT_TIMEOUT

def test_load_file(config_file):
    """Test values are read from YAML"""
    config_file.write_text("ss_binary: /usr/sbin/ss\ntimeout: 5\n")
    config = Config.load(config_file)
    assert config.ss_binary == "/usr/sbin/ss"
    assert config.timeout == 5.0

def test_load_empty_file(config_file):
    """Test an empty file yields defaults"""
    config_file.write_text("")
    assert Config.load(config_file) == Config()

def test_save_and_load(config_file):
    """Test saved configuration loads back unchanged"""
    Config(ss_binary="/bin/ss", timeout=None).save(config_file)
    assert Config.load(config_file) == Config(ss_binary="/bin/ss", timeout=None)

def test_env_overrides_file(config_file, monkeypatch):
    """Test environment variables take precedence over the file"""
    config_file.write_text("ss_binary: /usr/sbin/ss\ntimeout: 5\n")
    monkeypatch.setenv("LOCAL_PORTS_SS_BINARY", "/opt/ss")
    monkeypatch.setenv("LOCAL_PORTS_TIMEOUT", "0")
    config = Config.load(config_file)
    assert config.ss_binary == "/opt/ss"
    assert config.timeout is None

def test_invalid_yaml(config_file):
    """Test malformed YAML raises ConfigError"""
    config_file.write_text("ss_binary: [unclosed\n")
    with pytest.raises(ConfigError):
        Config.load(config_file)

def test_non_mapping(config_file):
    """Test a YAML list raises ConfigError"""
    config_file.write_text("- ss\n")
    with pytest.raises(ConfigError):
        Config.load(config_file)

def test_unknown_keys(config_file):
    """Test unknown keys are reported"""
    config_file.write_text("ss_binary: ss\nports: [1, 2]\n")
    with pytest.raises(ConfigError, match="ports"):
        Config.load(config_file)

def test_invalid_timeout(config_file, monkeypatch):
    """Test a non-numeric timeout raises ConfigError"""
    monkeypatch.setenv("LOCAL_PORTS_TIMEOUT", "soon")
    with pytest.raises(ConfigError, match="timeout"):
        Config.load(config_file)

def test_parse_timeout():
    """Test timeout normalization"""
    assert parse_timeout(None) is None
    assert parse_timeout("") is None
    assert parse_timeout(0) is None
    assert parse_timeout("2.5") == 2.5
    with pytest.raises(ConfigError):
        parse_timeout(-1)

@pytest.mark.parametrize("content, key", [
    ("ss_binary: 123\n", "ss_binary"),
    ("ss_binary: ''\n", "ss_binary"),
    ("source: [ss]\n", "source"),
])
def test_non_string_values(config_file, content, key):
    """Test source and ss_binary must be non-empty strings"""
    config_file.write_text(content)
    with pytest.raises(ConfigError, match=key):
        Config.load(config_file)

@pytest.mark.parametrize("content", ["timeout: true\n", "timeout: .inf\n", "timeout: .nan\n"])
def test_invalid_timeout_values(config_file, content):
    """Test booleans and non-finite timeouts are rejected"""
    config_file.write_text(content)
    with pytest.raises(ConfigError, match="timeout"):
        Config.load(config_file)

def test_unreadable_path(tmp_path):
    """Test a directory in place of the config file raises ConfigError"""
    with pytest.raises(ConfigError, match="Cannot read configuration file"):
        Config.load(tmp_path)

def test_permission_denied(config_file):
    """Test I/O errors while opening the file raise ConfigError"""
    config_file.write_text("ss_binary: ss\n")
    with patch('builtins.open', side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(ConfigError, match="Permission denied"):
            Config.load(config_file)

"""
Unit Tests for Construction Helpers and Source Settings
"""

import json

import pytest
from pydantic import ValidationError

from typedconf import (
    Config, DotEnvConfigProvider, JsonConfigProvider, SourceSettings, YamlConfigProvider,
    build_config, create_config, create_dotenv_config, create_json_config, create_yaml_config,
)


@pytest.fixture(autouse=True)
def no_config_path(monkeypatch):
    monkeypatch.delenv('CONFIG_PATH', raising=False)


@pytest.fixture
def sources(tmp_path):
    (tmp_path / '.env').write_text('PORT=8080\n')
    (tmp_path / 'app.json').write_text(json.dumps({'server': {'port': 9090}}))
    (tmp_path / 'app.yaml').write_text('server:\n  port: 7070\n')
    return tmp_path


def test_create_config_binds_provider():
    provider = object()
    config = create_config(provider)

    assert isinstance(config, Config)
    assert config.provider is provider


def test_create_dotenv_config_defaults_to_dot_env(sources, monkeypatch):
    nested = sources / 'pkg'
    nested.mkdir()
    monkeypatch.chdir(nested)

    config = create_dotenv_config()
    assert isinstance(config.provider, DotEnvConfigProvider)
    assert config.get('PORT') == 8080


def test_create_json_config(sources):
    config = create_json_config(sources / 'app.json')

    assert isinstance(config.provider, JsonConfigProvider)
    assert config.get('server.port') == 9090
    assert config.get_all() == {'server': {'port': 9090}}


def test_create_json_config_env_var(sources, monkeypatch):
    monkeypatch.setenv('MY_CONFIG', str(sources / 'app.json'))

    config = create_json_config('missing.json', env_var='MY_CONFIG')
    assert config.get('server.port') == 9090


def test_create_yaml_config(sources):
    config = create_yaml_config(sources / 'app.yaml')

    assert isinstance(config.provider, YamlConfigProvider)
    assert config.get('server.port') == 7070


class TestBuildConfig:
    """Construction from explicit settings."""

    def test_dotenv_default_path(self, sources, monkeypatch):
        monkeypatch.chdir(sources)

        config = build_config(SourceSettings())
        assert config.get('PORT') == 8080

    def test_from_mapping(self, sources):
        config = build_config({'kind': 'json', 'path': str(sources / 'app.json')})
        assert config.get('server.port') == 9090

    def test_yaml(self, sources):
        config = build_config({'kind': 'yaml', 'path': str(sources / 'app.yaml')})
        assert config.get('server.port') == 7070

    def test_env_var_passed_through(self, sources, monkeypatch):
        monkeypatch.setenv('ALT_PATH', str(sources / 'app.json'))

        config = build_config({'kind': 'json', 'path': 'nowhere.json', 'env_var': 'ALT_PATH'})
        assert config.get('server.port') == 9090

    def test_document_requires_path(self):
        with pytest.raises(ValidationError, match='path is required'):
            build_config({'kind': 'json'})

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            SourceSettings(kind='toml', path='x.toml')

    def test_settings_are_frozen(self):
        settings = SourceSettings()
        with pytest.raises(ValidationError):
            settings.path = 'other'

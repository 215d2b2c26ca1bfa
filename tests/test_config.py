import os

from argo_catalog.config import DEFAULT_SOURCE_FILES, get_settings


def test_defaults(monkeypatch):
    for name in ['ARGO_DATA_DIR', 'ARGO_SOURCE_FILES', 'ARGO_SYNTHETIC_FLOATS',
                 'ARGO_RANDOM_SEED', 'ARGO_HTTP_TIMEOUT', 'ARGO_LOG_LEVEL']:
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.data_dir == './data'
    assert settings.source_files == DEFAULT_SOURCE_FILES
    assert settings.synthetic_floats == 50
    assert settings.random_seed is None
    assert settings.http_timeout == 30.0
    assert settings.log_level == 'INFO'
    assert settings.source_locators()[0] == os.path.join('./data', '1901766_prof.nc')


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('ARGO_DATA_DIR', '/srv/argo')
    monkeypatch.setenv('ARGO_SOURCE_FILES', '1901766_prof.nc, https://example.org/7902242_prof.nc,')
    monkeypatch.setenv('ARGO_SYNTHETIC_FLOATS', '12')
    monkeypatch.setenv('ARGO_RANDOM_SEED', '7')
    monkeypatch.setenv('ARGO_HTTP_TIMEOUT', '2.5')
    monkeypatch.setenv('ARGO_LOG_LEVEL', 'debug')

    settings = get_settings()

    assert settings.synthetic_floats == 12
    assert settings.random_seed == 7
    assert settings.http_timeout == 2.5
    assert settings.log_level == 'DEBUG'
    assert settings.source_locators() == [
        os.path.join('/srv/argo', '1901766_prof.nc'),
        'https://example.org/7902242_prof.nc',
    ]


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv('ARGO_SYNTHETIC_FLOATS', 'many')
    monkeypatch.setenv('ARGO_HTTP_TIMEOUT', 'soon')
    settings = get_settings()
    assert settings.synthetic_floats == 50
    assert settings.http_timeout == 30.0


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv('ARGO_LOG_LEVEL', 'verbose')
    assert get_settings().log_level == 'INFO'

    monkeypatch.setenv('ARGO_LOG_LEVEL', ' warning ')
    assert get_settings().log_level == 'WARNING'

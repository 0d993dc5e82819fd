import os

import pytest

from vaultcodec.bootstrap.config.loader import get_configfile
from vaultcodec.bootstrap.config.settings import CodecConfig
from vaultcodec.bootstrap.deps import get_config


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """
    Run with no VAULTCODEC_* variables and an empty working directory,
    so neither the environment nor a stray config file leaks into settings.
    """
    for key in list(os.environ):
        if key.startswith("VAULTCODEC_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    get_configfile.cache_clear()
    get_config.cache_clear()
    yield tmp_path
    get_configfile.cache_clear()
    get_config.cache_clear()


@pytest.fixture
def config(isolated_env) -> CodecConfig:
    return CodecConfig()

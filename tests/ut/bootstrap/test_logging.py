import logging
import sys

import pytest

from vaultcodec.core.helpers.utils import scan, setup_logging


@pytest.mark.ut
def test_setup_logging_configures_root(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("DEBUG")

    assert calls[0]["level"] == "DEBUG"
    assert "%(name)s" in calls[0]["format"]


@pytest.mark.ut
def test_scan_imports_package_modules_before_call():
    @scan("vaultctl.bootstrap.commands")
    def target():
        return "done"

    assert target() == "done"
    assert "vaultctl.bootstrap.commands.convert" in sys.modules
    assert "vaultctl.bootstrap.commands.canonical" in sys.modules

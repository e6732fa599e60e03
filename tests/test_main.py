# tests/test_main.py

import logging

import pytest

from taskservice import __main__ as entrypoint
from taskservice.config import Config


def test_bad_connection_string_exits_nonzero(monkeypatch, caplog) -> None:
    monkeypatch.setattr(Config, "MONGODB_URI", "http://localhost:27017")
    caplog.set_level(logging.ERROR)

    with pytest.raises(SystemExit) as info:
        entrypoint.main()

    assert info.value.code == 1
    assert "Failed to connect to MongoDB" in caplog.text

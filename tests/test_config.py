import logging
import os
from pathlib import Path

import pytest

from currylisp import config


def test_prelude_files_default_empty(monkeypatch):
    monkeypatch.delenv("CURRYLISP_PRELUDE_PATH", raising=False)
    assert config.get_prelude_files() == []


def test_prelude_files_split_on_pathsep(monkeypatch):
    monkeypatch.setenv("CURRYLISP_PRELUDE_PATH", f"a.lisp{os.pathsep} b.lisp {os.pathsep}")
    assert config.get_prelude_files() == [Path("a.lisp"), Path("b.lisp")]


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 10000),
        ("5000", 5000),
        ("10", 100),
        ("lots", 10000),
    ]
)
def test_recursion_limit(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("CURRYLISP_RECURSION_LIMIT", raising=False)
    else:
        monkeypatch.setenv("CURRYLISP_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected


@pytest.mark.parametrize("raw, expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("", False)])
def test_lenient_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("CURRYLISP_LENIENT_UNBOUND", raw)
    assert config.lenient_unbound() is expected


@pytest.mark.parametrize("raw, expected", [("debug", logging.DEBUG), ("INFO", logging.INFO), ("bogus", logging.WARNING)])
def test_log_level(monkeypatch, raw, expected):
    monkeypatch.setenv("CURRYLISP_LOG_LEVEL", raw)
    assert config.get_log_level() == expected

import sys

import pytest

from ansikit import query


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("CLICOLOR", "CLICOLOR_FORCE", "NO_COLOR", "TERM", "COLORTERM", "CI"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(sys, "platform", "linux")
    return monkeypatch


@pytest.mark.parametrize("func", [query.no_color, query.clicolor_force])
def test_non_empty_not_present(clean_env, func):
    assert func() is False


@pytest.mark.parametrize("name,func", [("NO_COLOR", query.no_color), ("CLICOLOR_FORCE", query.clicolor_force)])
def test_non_empty_empty(clean_env, name, func):
    clean_env.setenv(name, "")
    assert func() is False


@pytest.mark.parametrize("name,func", [("NO_COLOR", query.no_color), ("CLICOLOR_FORCE", query.clicolor_force)])
def test_non_empty_texty(clean_env, name, func):
    clean_env.setenv(name, "hello")
    assert func() is True


def test_clicolor(clean_env):
    assert query.clicolor() is None
    clean_env.setenv("CLICOLOR", "0")
    assert query.clicolor() is False
    clean_env.setenv("CLICOLOR", "1")
    assert query.clicolor() is True


def test_term_on_unix(clean_env):
    assert query.term_supports_color() is False
    clean_env.setenv("TERM", "dumb")
    assert query.term_supports_color() is False
    clean_env.setenv("TERM", "xterm-256color")
    assert query.term_supports_color() is True
    assert query.term_supports_ansi_color() is True


def test_term_on_windows(clean_env):
    clean_env.setattr(sys, "platform", "win32")
    assert query.term_supports_color() is True
    assert query.term_supports_ansi_color() is False
    clean_env.setenv("TERM", "cygwin")
    assert query.term_supports_color() is True
    assert query.term_supports_ansi_color() is False
    clean_env.setenv("TERM", "dumb")
    assert query.term_supports_color() is False


@pytest.mark.parametrize("value,expected", [("truecolor", True), ("24bit", True), ("256", False)])
def test_truecolor(clean_env, value, expected):
    clean_env.setenv("COLORTERM", value)
    assert query.truecolor() is expected


def test_truecolor_unset(clean_env):
    assert query.truecolor() is False


def test_is_ci_by_presence(clean_env):
    assert query.is_ci() is False
    clean_env.setenv("CI", "false")
    assert query.is_ci() is True


def test_main_reports(clean_env, capsys):
    clean_env.setenv("NO_COLOR", "1")
    assert query.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "no_color: True" in lines
    assert "clicolor: None" in lines
    assert "is_ci: False" in lines
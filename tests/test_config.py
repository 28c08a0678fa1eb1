from pathlib import Path

from deskentry import config


def test_application_dirs_defaults(monkeypatch, tmp_path):
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("XDG_DATA_DIRS", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config.application_dirs() == [
        tmp_path / ".local" / "share" / "applications",
        Path("/usr/local/share/applications"),
        Path("/usr/share/applications"),
    ]


def test_application_dirs_from_environment(monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", "/home/me/data")
    monkeypatch.setenv("XDG_DATA_DIRS", "/opt/share::/usr/share")
    assert config.application_dirs() == [
        Path("/home/me/data/applications"),
        Path("/opt/share/applications"),
        Path("/usr/share/applications"),
    ]


def test_current_desktops(monkeypatch):
    monkeypatch.setenv("XDG_CURRENT_DESKTOP", "ubuntu:GNOME")
    assert config.current_desktops() == ["ubuntu", "GNOME"]
    monkeypatch.delenv("XDG_CURRENT_DESKTOP")
    assert config.current_desktops() == []


def test_current_locale(monkeypatch):
    for name in ["LC_ALL", "LC_MESSAGES", "LANG"]:
        monkeypatch.delenv(name, raising=False)
    assert config.current_locale() is None

    monkeypatch.setenv("LANG", "de_DE.UTF-8")
    assert config.current_locale() == "de_DE"
    monkeypatch.setenv("LC_MESSAGES", "sr_RS.UTF-8@latin")
    assert config.current_locale() == "sr_RS@latin"
    monkeypatch.setenv("LC_ALL", "C.UTF-8")
    assert config.current_locale() is None


def test_terminal_command(monkeypatch):
    monkeypatch.delenv("TERMINAL", raising=False)
    assert config.terminal_command() == ["xterm", "-e"]
    monkeypatch.setenv("TERMINAL", "kitty")
    assert config.terminal_command() == ["kitty", "-e"]
    monkeypatch.setenv("TERMINAL", "gnome-terminal --")
    assert config.terminal_command() == ["gnome-terminal", "--"]


def test_terminal_command_malformed_value(monkeypatch):
    monkeypatch.setenv("TERMINAL", 'foot "unterminated')
    assert config.terminal_command() == ["xterm", "-e"]

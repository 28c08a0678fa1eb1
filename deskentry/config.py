import logging
import os
import shlex
from pathlib import Path

DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"
DEFAULT_TERMINAL = ["xterm", "-e"]

logger = logging.getLogger(__name__)


def _env(name):
    value = os.environ.get(name, "").strip()
    return value or None


def application_dirs():
    data_home = _env("XDG_DATA_HOME")
    if data_home:
        dirs = [Path(data_home)]
    else:
        dirs = [Path.home() / ".local" / "share"]
    data_dirs = _env("XDG_DATA_DIRS") or DEFAULT_DATA_DIRS
    dirs.extend(Path(item) for item in data_dirs.split(":") if item)
    return [base / "applications" for base in dirs]


def current_desktops():
    value = _env("XDG_CURRENT_DESKTOP")
    if not value:
        return []
    return [item for item in value.split(":") if item]


def current_locale():
    for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = _env(name)
        if value:
            break
    else:
        return None
    if value in ("C", "POSIX") or value.startswith("C."):
        return None
    # Keys carry "lang_COUNTRY@modifier", the encoding is never part of them.
    locale, _, modifier = value.partition("@")
    locale = locale.split(".", 1)[0]
    if modifier:
        return f"{locale}@{modifier}"
    return locale


def terminal_command():
    value = _env("TERMINAL")
    if not value:
        return list(DEFAULT_TERMINAL)
    try:
        command = shlex.split(value)
    except ValueError as exc:
        logger.debug("Ignoring malformed TERMINAL %r: %s", value, exc)
        return list(DEFAULT_TERMINAL)
    if len(command) == 1:
        command.append("-e")
    return command

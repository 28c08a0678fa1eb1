import logging
import os
import shutil
from pathlib import Path

from . import config, fields
from .errors import ParseError
from .parser import parse_file

logger = logging.getLogger(__name__)


def desktop_file_id(path, base):
    relative = Path(path).relative_to(base)
    return "-".join(relative.parts)


def _try_exec_found(program):
    if os.path.isabs(program):
        return os.access(program, os.X_OK)
    return shutil.which(program) is not None


def should_show(entry, current_desktops):
    if entry.get(fields.TYPE) is not fields.Type.APPLICATION:
        return False
    if entry.get(fields.HIDDEN) or entry.get(fields.NO_DISPLAY):
        return False
    if not entry.get(fields.NAME) or not entry.get(fields.EXEC):
        return False

    desktops = set(current_desktops)
    only_show_in = entry.get(fields.ONLY_SHOW_IN)
    if only_show_in and not desktops.intersection(only_show_in):
        return False
    not_show_in = entry.get(fields.NOT_SHOW_IN)
    if not_show_in and desktops.intersection(not_show_in):
        return False

    try_exec = entry.get(fields.TRY_EXEC)
    if try_exec and not _try_exec_found(try_exec):
        return False
    return True


def _localized(entry, entry_field, locale):
    if locale:
        value = entry.get_localized(entry_field, locale)
        if value:
            return value
    return entry.get(entry_field)


def parse_desktop_file(path, current_desktops=None, locale=None):
    try:
        entry = parse_file(path)
    except ParseError as exc:
        logger.debug("Skipping %s: %s", path, exc)
        return None

    if current_desktops is None:
        current_desktops = config.current_desktops()
    if not should_show(entry, current_desktops):
        return None

    return {
        "name": _localized(entry, fields.NAME, locale),
        "comment": _localized(entry, fields.COMMENT, locale) or "",
        "icon": entry.get(fields.ICON) or "",
        "keywords": entry.get(fields.KEYWORDS) or [],
        "actions": [action for action in entry.actions() if entry.action_group(action)],
        "path": str(path),
        "entry": entry,
    }


def list_desktop_apps(dirs=None):
    if dirs is None:
        dirs = config.application_dirs()
    current_desktops = config.current_desktops()
    locale = config.current_locale()

    seen = set()
    apps = []
    for base in dirs:
        base = Path(base)
        if not base.is_dir():
            logger.debug("Applications directory not found: %s", base)
            continue
        for desktop_file in sorted(base.rglob("*.desktop")):
            file_id = desktop_file_id(desktop_file, base)
            # The first directory providing an ID wins, even if the entry is hidden.
            if file_id in seen:
                continue
            seen.add(file_id)
            parsed = parse_desktop_file(desktop_file, current_desktops, locale)
            if parsed:
                apps.append(parsed)
    apps.sort(key=lambda item: item["name"].lower())
    return apps

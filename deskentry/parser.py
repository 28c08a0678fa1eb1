"""Parser for the desktop entry file format.

https://specifications.freedesktop.org/desktop-entry-spec/latest/basic-format.html

Values are kept exactly as written after ``=``; decoding them is the job of
:mod:`deskentry.fields`.
"""

import re

from .errors import DesktopSyntaxError, NonUtf8Error, ReadError
from .model import DesktopEntry, Group

# Empty (whitespace only) lines and comments. A comment may end the file
# without a newline, a blank line may not.
_BLANK = re.compile(rb"[ \t]*\n|#[^\n]*(?:\n|\Z)")

# Any printable ASCII except the square brackets.
_HEADER = re.compile(rb"\[([\x20-\x5a\x5c\x5e-\x7e]+)\]\n")

_KEY = re.compile(
    rb"""
    (
        [A-Za-z0-9-]+
        (?:\[
            [a-z]{2,3}
            (?:_[A-Z]{2})?
            (?:\.[A-Za-z0-9-]+)?
            (?:@[A-Za-z0-9-]+)?
        \])?
    )
    [ \t]*=[ \t]*
    """,
    re.VERBOSE,
)


def _skip_blanks(data, pos):
    match = _BLANK.match(data, pos)
    while match and match.end() > pos:
        pos = match.end()
        match = _BLANK.match(data, pos)
    return pos


def _read_value(data, pos):
    end = data.find(b"\n", pos)
    if end == -1:
        end = len(data)
        next_pos = end
    else:
        next_pos = end + 1
    try:
        return data[pos:end].decode("utf-8"), next_pos
    except UnicodeDecodeError as exc:
        raise NonUtf8Error(pos + exc.start) from exc


def _read_entries(data, pos):
    entries = {}
    while True:
        key_start = _skip_blanks(data, pos)
        match = _KEY.match(data, key_start)
        if match is None:
            return entries, pos
        # The key pattern is ASCII only.
        key = match.group(1).decode("ascii").lower()
        entries[key], pos = _read_value(data, match.end())


def _syntax_error(data, pos, rule):
    line_start = data.rfind(b"\n", 0, pos) + 1
    line_end = data.find(b"\n", pos)
    if line_end == -1:
        line_end = len(data)
    snippet = data[line_start:line_end].decode("utf-8", "replace")
    return DesktopSyntaxError(
        position=pos,
        line=data.count(b"\n", 0, pos) + 1,
        column=pos - line_start + 1,
        snippet=snippet,
        rule=rule,
    )


def parse(data, path=None):
    """Parse a whole desktop entry document.

    ``data`` is a bytes-like object (``str`` is encoded as UTF-8). The entire
    input has to match the grammar, there are no partial results. ``path`` is
    recorded on the document as the file it was read from.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    data = bytes(data)

    groups = []
    pos = _skip_blanks(data, 0)
    while pos < len(data):
        header = _HEADER.match(data, pos)
        if header is None:
            break
        name = header.group(1).decode("ascii")
        entries, pos = _read_entries(data, header.end())
        pos = _skip_blanks(data, pos)
        groups.append(Group(name, entries))

    if pos != len(data):
        at_header = data.startswith(b"[", pos) or not groups
        raise _syntax_error(data, pos, "group-header" if at_header else "entry")
    return DesktopEntry(groups, path=path)


def parse_io(stream):
    try:
        data = stream.read()
    except OSError as exc:
        raise ReadError(getattr(stream, "name", None)) from exc
    return parse(data)


def parse_file(path):
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise ReadError(path) from exc
    return parse(data, path=str(path))

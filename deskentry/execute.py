"""Build the command line described by an ``Exec`` key.

https://specifications.freedesktop.org/desktop-entry-spec/latest/exec-variables.html
"""

import re
from dataclasses import dataclass, field

from . import fields
from .errors import (
    IncompleteEscapeError,
    IncompleteQuoteError,
    MissingActionError,
    MultipleFileArgsError,
    NoCommandError,
)

FIELD_CODE_RE = re.compile("%.")
FILE_LIST_CODES = ("%F", "%U")


@dataclass(frozen=True)
class ResolvedCommand:
    program: str
    arguments: tuple = ()

    @property
    def argv(self):
        return [self.program, *self.arguments]


@dataclass(frozen=True)
class ExecContext:
    entry: object
    args: tuple = field(default=())
    source_path: str = None


def split_command(command):
    """Yield the words of an ``Exec`` value after quote and escape removal.

    Quoting uses double quotes only and backslash escapes are only honoured
    inside them. Every unquoted space ends a word, so ``"a  b"`` gives
    ``["a", "", "b"]``.
    """
    word = []
    escaping = False
    in_quotes = False
    ended = True
    for char in command:
        if char == '"' and not escaping:
            in_quotes = not in_quotes
        elif char == "\\" and in_quotes:
            if escaping:
                word.append("\\")
            escaping = not escaping
        elif char == " " and not in_quotes:
            yield "".join(word)
            word = []
            ended = True
            continue
        else:
            word.append(char)
            escaping = False
        ended = False

    if escaping:
        raise IncompleteEscapeError()
    if in_quotes:
        raise IncompleteQuoteError()
    if not ended:
        yield "".join(word)


def _expand_field_codes(word, context):
    def replace(match):
        code = match.group(0)
        if code in ("%f", "%u"):
            return context.args[0] if context.args else ""
        if code == "%i":
            return context.entry.get(fields.ICON) or ""
        if code == "%c":
            return context.entry.get(fields.NAME) or ""
        if code == "%k":
            return context.source_path or ""
        if code == "%%":
            return "%"
        return code

    return FIELD_CODE_RE.sub(replace, word)


def parse_command(command, context):
    """Tokenize ``command`` and substitute its field codes.

    ``%F`` and ``%U`` must stand alone as a word and expand to every
    argument; all other codes are replaced inside words.
    """
    words = split_command(command)
    program = next(words, None)
    if program is None:
        raise NoCommandError()

    arguments = []
    had_file_list = False
    for word in words:
        if word in FILE_LIST_CODES:
            if had_file_list:
                raise MultipleFileArgsError()
            arguments.extend(context.args)
            had_file_list = True
        else:
            arguments.append(_expand_field_codes(word, context))
    return ResolvedCommand(program, tuple(arguments))


def resolve_command(entry, args=(), source_path=None, action=None):
    if action is None:
        group = entry.main_group()
    else:
        group = entry.action_group(action)
        if group is None:
            raise MissingActionError(action)

    command = group.get(fields.EXEC) if group is not None else None
    if not command:
        raise NoCommandError()

    if source_path is None:
        source_path = entry.path
    context = ExecContext(entry, tuple(args), source_path)
    return parse_command(command, context)

from .codec import split_multi_value, unescape
from .errors import (
    CommandParseError,
    DesktopEntryError,
    DesktopSyntaxError,
    ExecuteFailed,
    IncompleteEscapeError,
    IncompleteQuoteError,
    MissingActionError,
    MultipleFileArgsError,
    NoCommandError,
    NonUtf8Error,
    ParseError,
    ReadError,
)
from .execute import ExecContext, ResolvedCommand, parse_command, resolve_command, split_command
from .fields import Category, CustomCategory, Type, UnknownType, field_by_name
from .model import DesktopEntry, Group
from .parser import parse, parse_file, parse_io

__version__ = "0.1.0"

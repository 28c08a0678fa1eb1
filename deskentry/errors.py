class DesktopEntryError(Exception):
    pass


class ParseError(DesktopEntryError):
    pass


class DesktopSyntaxError(ParseError):
    """The input does not match the desktop entry grammar."""

    def __init__(self, position, line, column, snippet, rule):
        self.position = position
        self.line = line
        self.column = column
        self.snippet = snippet
        self.rule = rule
        super().__init__(
            f"Invalid syntax at line {line}, column {column} (expected {rule}): {snippet!r}"
        )


class NonUtf8Error(ParseError):
    def __init__(self, position):
        self.position = position
        super().__init__(f"Invalid UTF-8 byte sequence in value at byte {position}")


class ReadError(ParseError):
    def __init__(self, path=None):
        self.path = path
        if path is None:
            super().__init__("Could not read desktop entry")
        else:
            super().__init__(f"Could not read desktop entry: {path}")


class CommandParseError(DesktopEntryError):
    pass


class NoCommandError(CommandParseError):
    def __init__(self):
        super().__init__("Exec value does not contain a command")


class IncompleteEscapeError(CommandParseError):
    def __init__(self):
        super().__init__("Exec value ends in the middle of an escape sequence")


class IncompleteQuoteError(CommandParseError):
    def __init__(self):
        super().__init__("Exec value has an unterminated quote")


class MultipleFileArgsError(CommandParseError):
    def __init__(self):
        super().__init__("Exec value contains more than one %F or %U field code")


class ExecuteFailed(DesktopEntryError):
    def __init__(self, program, reason=None):
        self.program = program
        message = f"Failed to execute {program!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MissingActionError(CommandParseError, KeyError):
    def __init__(self, action):
        self.action = action
        super().__init__(f"Desktop entry has no [Desktop Action {action}] group")

    def __str__(self):
        return self.args[0]

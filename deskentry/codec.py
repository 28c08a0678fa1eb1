"""String-level escape rules of desktop entry values.

See https://specifications.freedesktop.org/desktop-entry-spec/latest/value-types.html
"""

_ESCAPES = {
    "s": " ",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
}

_LIST_ESCAPES = {**_ESCAPES, ";": ";"}


def _decode_escape(char, table):
    # A lone backslash at the end of the value stays a backslash.
    if char is None:
        return "\\"
    if char in table:
        return table[char]
    return "\\" + char


def unescape(raw):
    """Decode ``\\s``, ``\\n``, ``\\t``, ``\\r`` and ``\\\\`` in a string value.

    Unknown escapes are kept as they are, backslash included.
    """
    if "\\" not in raw:
        return raw
    content = []
    chars = iter(raw)
    for char in chars:
        if char == "\\":
            content.append(_decode_escape(next(chars, None), _ESCAPES))
        else:
            content.append(char)
    return "".join(content)


def split_multi_value(raw):
    """Yield the elements of a ``;`` separated list value.

    ``\\;`` is a literal semicolon. The empty element after the trailing
    separator is not produced, and an empty value has no elements.
    """
    value = []
    pending = False
    chars = iter(raw)
    for char in chars:
        if char == ";":
            yield "".join(value)
            value = []
            pending = False
            continue
        if char == "\\":
            value.append(_decode_escape(next(chars, None), _LIST_ESCAPES))
        else:
            value.append(char)
        pending = True
    if pending:
        yield "".join(value)

"""Typed views over the raw values of the recognized desktop entry keys.

A field only knows its key name and how to decode a raw value; looking the
value up is left to :mod:`deskentry.model`.
"""

import enum
from dataclasses import dataclass

from .codec import split_multi_value, unescape


class Type(enum.Enum):
    APPLICATION = "Application"
    LINK = "Link"
    DIRECTORY = "Directory"


# Values the format reserves for future use or for vendor extensions.
@dataclass(frozen=True)
class UnknownType:
    value: str


class Category(enum.Enum):
    AUDIO_VIDEO = "AudioVideo"
    AUDIO = "Audio"
    VIDEO = "Video"
    DEVELOPMENT = "Development"
    EDUCATION = "Education"
    GAME = "Game"
    GRAPHICS = "Graphics"
    NETWORK = "Network"
    OFFICE = "Office"
    SCIENCE = "Science"
    SETTINGS = "Settings"
    SYSTEM = "System"
    UTILITY = "Utility"


@dataclass(frozen=True)
class CustomCategory:
    value: str


_TYPES = {member.value: member for member in Type}
_CATEGORIES = {member.value: member for member in Category}


def decode_type(raw):
    return _TYPES.get(raw) or UnknownType(raw)


def decode_category(raw):
    return _CATEGORIES.get(raw) or CustomCategory(raw)


class Field:
    def __init__(self, name):
        self.name = name

    @property
    def key(self):
        return self.name.lower()

    def deserialize(self, raw):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class BooleanField(Field):
    def deserialize(self, raw):
        if raw == "true":
            return True
        if raw == "false":
            return False
        return None


class StringField(Field):
    def deserialize(self, raw):
        return unescape(raw)


class StringListField(Field):
    def deserialize(self, raw):
        return list(split_multi_value(raw))


class TypeField(Field):
    def deserialize(self, raw):
        return decode_type(raw)


class CategoriesField(Field):
    def deserialize(self, raw):
        return [decode_category(value) for value in split_multi_value(raw)]


TYPE = TypeField("Type")
VERSION = StringField("Version")
NAME = StringField("Name")
GENERIC_NAME = StringField("GenericName")
NO_DISPLAY = BooleanField("NoDisplay")
COMMENT = StringField("Comment")
ICON = StringField("Icon")
HIDDEN = BooleanField("Hidden")
ONLY_SHOW_IN = StringListField("OnlyShowIn")
NOT_SHOW_IN = StringListField("NotShowIn")
DBUS_ACTIVATABLE = BooleanField("DBusActivatable")
TRY_EXEC = StringField("TryExec")
EXEC = StringField("Exec")
PATH = StringField("Path")
TERMINAL = BooleanField("Terminal")
ACTIONS = StringListField("Actions")
MIME_TYPE = StringListField("MimeType")
CATEGORIES = CategoriesField("Categories")
IMPLEMENTS = StringListField("Implements")
KEYWORDS = StringListField("Keywords")
STARTUP_NOTIFY = BooleanField("StartupNotify")
STARTUP_WM_CLASS = StringField("StartupWMClass")
URL = StringField("URL")

FIELDS = {
    field.key: field
    for field in (
        TYPE,
        VERSION,
        NAME,
        GENERIC_NAME,
        NO_DISPLAY,
        COMMENT,
        ICON,
        HIDDEN,
        ONLY_SHOW_IN,
        NOT_SHOW_IN,
        DBUS_ACTIVATABLE,
        TRY_EXEC,
        EXEC,
        PATH,
        TERMINAL,
        ACTIONS,
        MIME_TYPE,
        CATEGORIES,
        IMPLEMENTS,
        KEYWORDS,
        STARTUP_NOTIFY,
        STARTUP_WM_CLASS,
        URL,
    )
}


def field_by_name(name):
    return FIELDS[name.lower()]

from dataclasses import dataclass, field
from types import MappingProxyType

from . import fields

DESKTOP_ENTRY_GROUP = "Desktop Entry"
ACTION_GROUP_PREFIX = "Desktop Action "


@dataclass(frozen=True)
class Group:
    """A named section holding raw, undecoded values keyed by lower-cased key."""

    name: str
    entries: dict = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __eq__(self, other):
        if not isinstance(other, Group):
            return NotImplemented
        return self.name == other.name and dict(self.entries) == dict(other.entries)

    def __hash__(self):
        return hash(self.name)

    def get_raw(self, key):
        return self.entries.get(key.lower())

    def get(self, entry_field):
        raw = self.get_raw(entry_field.name)
        if raw is None:
            return None
        return entry_field.deserialize(raw)

    # Exact "<Key>[<locale>]" lookup only, "de_DE" does not fall back to "de".
    def get_localized(self, entry_field, locale):
        raw = self.get_raw(f"{entry_field.name}[{locale}]")
        if raw is None:
            return None
        return entry_field.deserialize(raw)


class DesktopEntry:
    def __init__(self, groups, path=None):
        self._groups = tuple(groups)
        self._path = path

    @property
    def path(self):
        return self._path

    def groups(self):
        return iter(self._groups)

    def __iter__(self):
        return self.groups()

    def __len__(self):
        return len(self._groups)

    def __getitem__(self, name):
        group = self.group(name)
        if group is None:
            raise KeyError(name)
        return group

    def __eq__(self, other):
        if not isinstance(other, DesktopEntry):
            return NotImplemented
        return self._groups == other._groups

    def __repr__(self):
        return f"DesktopEntry({list(self._groups)!r}, path={self.path!r})"

    def group(self, name):
        for group in self._groups:
            if group.name == name:
                return group
        return None

    def main_group(self):
        return self.group(DESKTOP_ENTRY_GROUP)

    def action_group(self, action_name):
        return self.group(ACTION_GROUP_PREFIX + action_name)

    def get(self, entry_field):
        group = self.main_group()
        if group is None:
            return None
        return group.get(entry_field)

    def get_localized(self, entry_field, locale):
        group = self.main_group()
        if group is None:
            return None
        return group.get_localized(entry_field, locale)

    def actions(self):
        return self.get(fields.ACTIONS) or []

"""Property mapping tables – external sort keys to internal entity fields."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Iterator, Mapping


@dataclasses.dataclass(frozen=True, slots=True)
class MappedField:
    """One internal field an external key sorts by.

    ``invert`` flips the requested direction for this field only, e.g. an
    ascending ``age`` is a descending ``date_of_birth``.
    """

    name: str
    invert: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class PropertyMappingValue:
    """Ordered internal fields behind one external key."""

    fields: tuple[MappedField, ...]

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("PropertyMappingValue needs at least one field")

    @classmethod
    def of(cls, *names: str, invert: bool = False) -> "PropertyMappingValue":
        """Shorthand: every field in *names* shares the same ``invert`` flag."""
        return cls(tuple(MappedField(name, invert) for name in names))


class PropertyMapping(Mapping[str, PropertyMappingValue]):
    """Read-only, case-insensitive table of external key -> mapping value.

    Example::

        table = PropertyMapping({
            "name": PropertyMappingValue.of("first_name", "last_name"),
            "age": PropertyMappingValue.of("date_of_birth", invert=True),
        })
        table["NAME"].fields[0].name  # "first_name"
    """

    def __init__(self, entries: Mapping[str, PropertyMappingValue]) -> None:
        folded: dict[str, PropertyMappingValue] = {}
        keys: dict[str, str] = {}
        for key, value in entries.items():
            norm = self._normalize(key)
            if not norm:
                raise ValueError("Property mapping keys must not be blank")
            if norm in folded:
                raise ValueError(f"Duplicate property mapping key '{key}'")
            folded[norm] = value
            keys[norm] = key.strip()
        self._entries = MappingProxyType(folded)
        self._keys = MappingProxyType(keys)

    @staticmethod
    def _normalize(key: str) -> str:
        return key.strip().casefold()

    def __getitem__(self, key: str) -> PropertyMappingValue:
        return self._entries[self._normalize(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._normalize(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:  # pragma: no cover
        return f"PropertyMapping({list(self)!r})"


__all__ = ["MappedField", "PropertyMapping", "PropertyMappingValue"]

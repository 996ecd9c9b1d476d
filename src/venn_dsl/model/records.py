"""Record model: one immutable dataclass per Venn diagram statement.

Every record remembers the source line it came from in ``line``.  The line
is left out of equality, so records built by hand compare equal to parsed
ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

Number = Union[int, float]
StyleValue = Union[str, int, float]


@dataclass(frozen=True)
class Title:
    """Free-form diagram title from a ``title`` statement."""

    type: ClassVar[str] = "title"

    text: str
    line: int | None = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class SetDecl:
    """A named set, optionally weighted by ``size``."""

    type: ClassVar[str] = "set"

    id: str
    size: Number | None = None
    line: int | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("SetDecl id must be a non-empty string")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "id": self.id, "size": self.size}


@dataclass(frozen=True)
class Intersection:
    """An overlap between two or more sets.

    ``sets`` keeps the order the identifiers were written in; repeated
    identifiers are kept as written.
    """

    type: ClassVar[str] = "intersect"

    sets: tuple[str, ...]
    label: str | None = None
    size: Number | None = None
    line: int | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the record stays hashable.
        object.__setattr__(self, "sets", tuple(self.sets))
        if len(self.sets) < 2:
            raise ValueError("Intersection needs at least two sets")

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "sets": list(self.sets),
            "label": self.label,
            "size": self.size,
        }


@dataclass(frozen=True)
class StyleAttribute:
    """One ``key:value`` pair of a style statement."""

    key: str
    value: StyleValue

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True)
class StyleDecl:
    """Presentation overrides for the set or intersection named ``id``."""

    type: ClassVar[str] = "style"

    id: str
    attributes: tuple[StyleAttribute, ...]
    line: int | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))
        if not self.attributes:
            raise ValueError("StyleDecl needs at least one attribute")

    def as_dict(self) -> dict[str, StyleValue]:
        """Attributes as a mapping; later keys win over earlier ones."""
        return {a.key: a.value for a in self.attributes}

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "id": self.id,
            "attributes": [a.to_dict() for a in self.attributes],
        }


Record = Union[Title, SetDecl, Intersection, StyleDecl]

"""Edge labels and the compatibility rule between touching edges.

Every tile edge shows half of an insect: the species and whether it is the
upper or the bottom half. Two edges fit together when they complete the same
insect, i.e. same species and opposite halves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Species(Enum):
    """The insects printed on tile edges."""

    SPIDER = "spider"
    LADYBUG = "ladybug"
    BEE = "bee"
    CRICKET = "cricket"


class Polarity(Enum):
    """Which half of the insect an edge shows."""

    UPPER = "upper"
    BOTTOM = "bottom"

    def flipped(self) -> Polarity:
        """Return the other half."""
        return Polarity.BOTTOM if self is Polarity.UPPER else Polarity.UPPER


@dataclass(frozen=True)
class EdgeLabel:
    """One oriented edge pattern.

    Attributes:
        species: The insect shown on the edge.
        polarity: Which half of the insect is shown.
    """

    species: Species
    polarity: Polarity

    @classmethod
    def parse(cls, value: object) -> EdgeLabel:
        """Build a label from a loose description.

        Accepts an existing ``EdgeLabel``, a ``"species/polarity"`` string or a
        two-item ``(species, polarity)`` sequence. Names are case-insensitive
        and may also be the enum members themselves.

        Args:
            value: The description to parse.

        Returns:
            The parsed EdgeLabel.

        Raises:
            ValueError: If the value has the wrong shape or names an unknown
                species or polarity.
        """
        if isinstance(value, EdgeLabel):
            return value
        if isinstance(value, str):
            parts = value.split("/")
        elif isinstance(value, (list, tuple)):
            parts = list(value)
        else:
            raise ValueError(f"Cannot parse edge label from {value!r}")
        if len(parts) != 2:
            raise ValueError(f"Edge label needs species and polarity, got {value!r}")
        return cls(_coerce(Species, parts[0]), _coerce(Polarity, parts[1]))

    def matches(self, other: EdgeLabel) -> bool:
        """Return True if this edge can touch *other*.

        Args:
            other: The facing edge of the neighbouring tile.

        Returns:
            True when both edges show the same species and opposite halves.
        """
        return compatible(self, other)

    def __str__(self) -> str:
        """Return a compact form like ``spider/upper``."""
        return f"{self.species.value}/{self.polarity.value}"


def _coerce(enum_cls: type[Species] | type[Polarity], raw: object) -> Species | Polarity:
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown {enum_cls.__name__.lower()}: {raw!r}") from None


def compatible(a: EdgeLabel, b: EdgeLabel) -> bool:
    """Return True if two facing edges fit together.

    The relation is symmetric: ``compatible(a, b) == compatible(b, a)``.

    Args:
        a: One edge.
        b: The edge it touches.

    Returns:
        True iff the species match and the polarities differ.
    """
    return a.species == b.species and a.polarity != b.polarity

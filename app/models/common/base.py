"""Base class for domain value objects."""

from dataclasses import asdict, dataclass, replace
from typing import Any, Self


@dataclass
class BaseEntity:
    """Dataclass entity with dict export and copy-on-change."""

    def to_dict(self) -> dict[str, Any]:
        """Nested dict of all fields."""
        return asdict(self)

    def evolve(self, **changes: Any) -> Self:
        """Copy with some fields replaced; the original is left untouched."""
        return replace(self, **changes)

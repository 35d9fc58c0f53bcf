"""Immutable property bag for ``WITH (...)`` clauses."""

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stream_sql_tree.tree.base import Expression

PropertySource = Union["GenericProperties", Mapping[str, Expression], Iterable[Tuple[str, Expression]]]


class GenericProperties(BaseModel):
    """An ordered, read-only mapping of property names to expressions.

    Entries keep their insertion order for rendering and iteration. Equality
    follows mapping semantics: two property bags are equal when they hold the
    same keys with equal values, regardless of order.

    Attributes:
        entries: The ``(key, value)`` pairs in insertion order
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: Tuple[Tuple[str, Expression], ...] = Field(
        default=(), description="Property name/value pairs in insertion order"
    )

    @field_validator("entries")
    @classmethod
    def _reject_duplicate_keys(
        cls, entries: Tuple[Tuple[str, Expression], ...]
    ) -> Tuple[Tuple[str, Expression], ...]:
        seen = set()
        for key, _ in entries:
            if key in seen:
                raise ValueError(f"Duplicate property: {key}")
            seen.add(key)
        return entries

    @classmethod
    def of(cls, source: Optional[PropertySource] = None) -> "GenericProperties":
        """Build a property bag from a mapping or an iterable of pairs.

        Args:
            source: A ``GenericProperties``, a mapping, or ``(key, value)`` pairs

        Returns:
            A new ``GenericProperties`` (or ``source`` itself if it already is one)

        Raises:
            ValueError: If the pairs contain the same key twice
        """
        if source is None:
            return cls()
        if isinstance(source, GenericProperties):
            return source
        if isinstance(source, Mapping):
            return cls(entries=tuple(source.items()))
        return cls(entries=tuple(source))

    def get(self, key: str, default: Any = None) -> Any:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return default

    def keys(self) -> Iterator[str]:
        return (key for key, _ in self.entries)

    def values(self) -> Iterator[Expression]:
        return (value for _, value in self.entries)

    def items(self) -> Iterator[Tuple[str, Expression]]:
        return iter(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    def as_dict(self) -> Dict[str, Expression]:
        """Return a new dict with the entries; changing it does not affect this object."""
        return dict(self.entries)

    def __getitem__(self, key: str) -> Expression:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return any(entry_key == key for entry_key, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GenericProperties):
            return NotImplemented
        return type(self) is type(other) and dict(self.entries) == dict(other.entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries))

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.entries)
        return f"{type(self).__name__}({{{body}}})"

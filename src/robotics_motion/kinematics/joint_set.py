"""Define a class representing an ordered collection of unique joint names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from robotics_motion.errors import InvariantViolationError, JointNotFoundError


@dataclass(frozen=True, init=False)
class JointSet:
    """An ordered collection of unique joint names.

    Two joint sets are equal when they hold the same names in the same order, and
    similar when they hold the same names in any order.
    """

    names: tuple[str, ...]
    _indices: dict[str, int] = field(repr=False, compare=False, hash=False)

    def __init__(self, names: Iterable[str] = ()) -> None:
        """Initialize the joint set, dropping repeated names but keeping first-seen order.

        :param names: Joint names held by the joint set
        """
        if isinstance(names, str):
            names = (names,)

        unique = tuple(dict.fromkeys(names))
        object.__setattr__(self, "names", unique)
        object.__setattr__(self, "_indices", {name: i for i, name in enumerate(unique)})

    @classmethod
    def empty(cls) -> JointSet:
        """Construct a joint set without any joints."""
        return cls()

    def __len__(self) -> int:
        """Retrieve the number of joints in the set."""
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        """Provide an iterator over the joint names in order."""
        return iter(self.names)

    def __contains__(self, name: object) -> bool:
        """Evaluate whether the named joint is included in the set."""
        return name in self._indices

    def __getitem__(self, index: int | slice) -> str | JointSet:
        """Access the joint name at the given index (or a joint set for a slice)."""
        if isinstance(index, slice):
            return JointSet(self.names[index])
        return self.names[index]

    def __str__(self) -> str:
        return f"JointSet {{ {', '.join(self.names)} }}"

    @property
    def count(self) -> int:
        """Retrieve the number of joints in the set."""
        return len(self.names)

    def contains(self, name: str) -> bool:
        """Evaluate whether the named joint is included in the set."""
        return name in self

    def try_get_index_of(self, name: str) -> int | None:
        """Find the position of the named joint, or None if the joint is absent."""
        return self._indices.get(name)

    def get_index_of(self, name: str) -> int:
        """Find the position of the named joint in the set.

        :param name: Name of the joint to be found
        :return: Index of the joint within the set
        :raises JointNotFoundError: If the joint is missing from the set
        """
        index = self.try_get_index_of(name)
        if index is None:
            raise JointNotFoundError(f"Joint '{name}' is missing in {self}.")
        return index

    def is_subset(self, other: JointSet) -> bool:
        """Evaluate whether every joint in this set also occurs in the other set."""
        return all(name in other for name in self.names)

    def is_similar(self, other: JointSet) -> bool:
        """Evaluate whether the other set holds exactly the same joints, in any order."""
        return len(other) == len(self) and self.is_subset(other)

    def add_prefix(self, prefix: str) -> JointSet:
        """Create a joint set with the given prefix added to every joint name."""
        return JointSet(prefix + name for name in self.names)

    def append(self, *names: str | Iterable[str]) -> JointSet:
        """Create a joint set with the given joint names appended.

        :param names: Joint names (or iterables of joint names, e.g. other joint sets)
        :return: New joint set holding this set's joints followed by the given joints
        :raises InvariantViolationError: If an appended name is already in the set
        """
        new_names = list(self.names)
        for item in names:
            for name in (item,) if isinstance(item, str) else item:
                if name in new_names:
                    raise InvariantViolationError(f"Cannot append duplicate joint '{name}'.")
                new_names.append(name)
        return JointSet(new_names)

    def combine(self, other: Iterable[str]) -> JointSet:
        """Create the union of this set and the given joints, skipping already-present names."""
        return JointSet((*self.names, *other))

    @staticmethod
    def union(a: JointSet | None, b: JointSet | None) -> JointSet | None:
        """Combine two optional joint sets, returning the non-None side if either is None."""
        if a is None:
            return b
        if b is None:
            return a
        return a.combine(b)

    def to_list(self) -> list[str]:
        """Convert the joint set into a list of joint names."""
        return list(self.names)

from enum import Enum
from functools import cmp_to_key
from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np


class UnknownPolicy(str, Enum):
    """Decides where values missing from an explicit order are placed."""
    first = "first"
    last = "last"


class DuplicateValueError(ValueError):
    """Raised when a value appears more than once in an explicit order."""

    def __init__(self, value: Any, positions: Tuple[int, int]) -> None:
        self.value = value
        self.positions = positions
        super().__init__(f"Value {value!r} appears more than once in the order (positions {positions[0]} and {positions[1]}).")


class IncomparableValueError(TypeError):
    """Raised when comparing a value that has no rank and no unknown policy is set."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Cannot compare value {value!r}, it is not part of the explicit order.")


def index_map(values: Iterable[Hashable]) -> Mapping[Hashable, int]:
    """Maps each value to the index of its position.
    Args:
        values (Iterable[Hashable]): Distinct values, in order.
    Raises:
        DuplicateValueError: If a value appears more than once.
    Returns:
        Mapping[Hashable, int]: Read-only mapping from value to its index.
    """
    ranks = {}
    for ind, value in enumerate(values):
        if value in ranks:
            raise DuplicateValueError(value, positions=(ranks[value], ind))
        ranks[value] = ind
    return MappingProxyType(ranks)


class ExplicitOrder:
    """Implements a total order given by an explicit list of items.
       Items are ranked by their position in the list. Items missing from the list are placed
       according to the `unknown` policy; without one, comparing them raises `IncomparableValueError`.
    """

    def __init__(self, order: Sequence[Hashable], unknown: Optional[UnknownPolicy] = None) -> None:
        self._setup(index_map(order), unknown)

    @classmethod
    def from_rank_map(cls, rank_map: Mapping[Hashable, int], unknown: Optional[UnknownPolicy] = None) -> "ExplicitOrder":
        """Creates an order from already computed ranks. Ranks are trusted to be unique and contiguous from 0."""
        order = cls.__new__(cls)
        order._setup(rank_map, unknown)
        return order

    def _setup(self, rank_map: Mapping[Hashable, int], unknown: Optional[UnknownPolicy]) -> None:
        self._rank_map = MappingProxyType(dict(rank_map)) # frozen copy, never mutated afterwards
        self._unknown = UnknownPolicy(unknown) if unknown is not None else None

    @property
    def rank_map(self) -> Mapping[Hashable, int]:
        return self._rank_map

    @property
    def unknown(self) -> Optional[UnknownPolicy]:
        return self._unknown

    @property
    def key(self) -> Callable[[Any], Any]:
        """Key function for `sorted`, `min`, `max` and `list.sort`."""
        return cmp_to_key(self.compare)

    def rank(self, value: Hashable) -> int:
        """Resolves the rank of a value. Unknown values get a sentinel rank: -1 when they go first
           and N when they go last, so all unknown values tie with each other.
        """
        rank = self._rank_map.get(value)
        if rank is not None:
            return rank
        if self._unknown == UnknownPolicy.first:
            return -1
        if self._unknown == UnknownPolicy.last:
            return len(self._rank_map)
        raise IncomparableValueError(value)

    def compare(self, left: Hashable, right: Hashable) -> int:
        # ranks are bounded by [-1, N], so subtraction is a valid three-way comparison
        return self.rank(left) - self.rank(right)

    def sort(self, items: Sequence[Hashable], return_index: bool = False) -> List[Any]:
        """Arranges items by rank. Items sharing a rank keep their relative input order.
        Args:
            items (Sequence[Hashable]): Items to sort.
            return_index (bool, optional): Return the permutation of indices instead of the items. Defaults to False.
        Returns:
            List[Any]: Sorted items, or indices into `items` in sorted order.
        """
        ranks = np.fromiter((self.rank(item) for item in items), dtype=np.int64, count=len(items))
        index = np.argsort(ranks, kind="stable").tolist()
        if return_index:
            return index
        return [items[i] for i in index]

    def is_ordered(self, items: Iterable[Hashable]) -> bool:
        items = list(items)
        return all(self.compare(a, b) <= 0 for a, b in zip(items, items[1:]))

    def __contains__(self, value: Hashable) -> bool:
        return value in self._rank_map

    def __len__(self) -> int:
        return len(self._rank_map)

    def __eq__(self, other: object) -> bool:
        # the unknown policy is not part of equality
        if isinstance(other, ExplicitOrder):
            return dict(self._rank_map) == dict(other._rank_map)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._rank_map.items()))

    def __getstate__(self) -> Dict[str, Any]:
        return {"rank_map": dict(self._rank_map), "unknown": self._unknown}

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self._setup(state["rank_map"], state["unknown"])

    def _values_in_order(self) -> List[Hashable]:
        return sorted(self._rank_map, key=self._rank_map.__getitem__)

    def __str__(self) -> str:
        return ", ".join([str(item) for item in self._values_in_order()])

    def __repr__(self) -> str:
        unknown = f"UnknownPolicy.{self._unknown.name}" if self._unknown is not None else None
        return f"ExplicitOrder({self._values_in_order()!r}, unknown={unknown})"


def explicit(least: Hashable, *remaining: Hashable, unknown: Optional[UnknownPolicy] = None) -> ExplicitOrder:
    """Creates an explicit order from its least value followed by the remaining values in order."""
    return ExplicitOrder([least, *remaining], unknown=unknown)

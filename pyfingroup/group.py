import logging
from itertools import combinations
from types import MappingProxyType
from typing import AbstractSet, Dict, Iterator, List, Mapping

from pyfingroup.axioms import identity, inverses, is_associative, is_closed
from pyfingroup.core import Operator

logger = logging.getLogger(__name__)


class GroupError(ValueError):
    """Raised when a set of elements is rejected as a group."""


class NotAGroupError(GroupError):
    def __init__(self) -> None:
        super().__init__("elements and operator do not form a group")


class NotAssociativeError(GroupError):
    def __init__(self) -> None:
        super().__init__("elements and operator do not satisfy associativity")


class Group[T: Operator]:
    """
    A finite set of elements that is known to satisfy the group axioms under its operation.

    Instances are meant to be obtained through GroupBuilder, which checks the axioms first. The group keeps a
    reference to the caller's set and never modifies it.
    """

    _elements: AbstractSet[T]
    _identity: T
    _inverses: Mapping[T, T]

    def __init__(self, elements: AbstractSet[T], identity: T, inverses: Dict[T, T]) -> None:
        """
        Stores the given parts as they are. Nothing is validated here: use GroupBuilder or from_elements to get a
        Group whose elements have passed the axiom checks.
        """
        self._elements = elements
        self._identity = identity
        self._inverses = MappingProxyType(inverses)

    @classmethod
    def from_elements(cls, elements: AbstractSet[T], check_associativity: bool = True) -> "Group[T]":
        """Shorthand for GroupBuilder(elements).check_associativity(check_associativity).build()."""
        return GroupBuilder(elements).check_associativity(check_associativity).build()

    @property
    def elements(self) -> AbstractSet[T]:
        return self._elements

    @property
    def identity(self) -> T:
        """The identity element, e.operate(x) == x for every x."""
        return self._identity

    @property
    def inverses(self) -> Mapping[T, T]:
        """Read-only mapping from every element to its inverse."""
        return self._inverses

    def inverse(self, element: T) -> T:
        """Returns the inverse of element. Raises KeyError if it is not in the group."""
        return self._inverses[element]

    def order(self) -> int:
        return len(self._elements)

    def is_abelian(self) -> bool:
        """
        Returns whether x.operate(y) == y.operate(x) for every pair of distinct elements.
        """
        for x, y in combinations(self._elements, 2):
            if x.operate(y) != y.operate(x):
                logger.debug("Failed commutativity assertion on (%r, %r)", x, y)

                return False

        return True

    def possible_subgroup_orders(self) -> List[int]:
        """
        Returns, in ascending order, the divisors of the order of the group.

        By Lagrange's theorem no subgroup can have any other order. Whether a subgroup of each returned order
        exists is not checked.
        """
        n = self.order()

        return [d for d in range(1, n + 1) if n % d == 0]

    def __len__(self) -> int:
        return self.order()

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __contains__(self, item: object) -> bool:
        return item in self._elements

    def __repr__(self) -> str:
        return f"Group(order={self.order()}, identity={self._identity!r})"


class GroupBuilder[T: Operator]:
    """
    Checks a candidate set of elements against the group axioms and builds a Group out of it.

    Closure, identity and inverses are always checked. Associativity, being cubic, can be skipped with
    check_associativity(False) when the caller already knows it holds.
    """

    elements: AbstractSet[T]
    check_associative: bool

    def __init__(self, elements: AbstractSet[T]) -> None:
        self.elements = elements
        self.check_associative = True

    def check_associativity(self, check: bool) -> "GroupBuilder[T]":
        self.check_associative = check

        return self

    def build(self) -> Group[T]:
        """
        Returns the validated Group.

        Raises NotAGroupError if closure, identity or inverses fail, and NotAssociativeError if associativity is
        checked and fails.
        """
        e = identity(self.elements)
        inverse_map = inverses(self.elements)
        closed = is_closed(self.elements)

        if not closed or e is None or inverse_map is None:
            logger.debug(
                "Rejected %d elements: closed=%s, identity=%r, inverses=%s",
                len(self.elements),
                closed,
                e,
                inverse_map is not None,
            )
            raise NotAGroupError()

        if self.check_associative and not is_associative(self.elements):
            logger.debug("Rejected %d elements: not associative", len(self.elements))
            raise NotAssociativeError()

        logger.debug(
            "Built group of order %d (associativity checked: %s)", len(self.elements), self.check_associative
        )

        return Group(self.elements, e, inverse_map)

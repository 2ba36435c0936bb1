import logging
from typing import AbstractSet, Dict, List, Optional, Tuple

from pyfingroup.core import Operator

logger = logging.getLogger(__name__)


def is_closed[T: Operator](elements: AbstractSet[T]) -> bool:
    """
    Returns whether x.operate(y) is in elements for every ordered pair (x, y), x == y included.

    The empty set is vacuously closed.
    """
    for x in elements:
        for y in elements:
            product = x.operate(y)
            if product not in elements:
                logger.debug("Failed closure assertion: %r.operate(%r) = %r", x, y, product)

                return False

    return True


def is_associative[T: Operator](elements: AbstractSet[T]) -> bool:
    """
    Returns whether (x * y) * z == x * (y * z) for every ordered triple.

    This is cubic in the size of the set.
    """
    for x in elements:
        for y in elements:
            for z in elements:
                left = x.operate(y).operate(z)
                right = x.operate(y.operate(z))
                if left != right:
                    logger.debug("Failed associativity assertion on (%r, %r, %r): %r == %r", x, y, z, left, right)

                    return False

    return True


def identity[T: Operator](elements: AbstractSet[T]) -> Optional[T]:
    """
    Returns the first element e such that e.operate(y) == y for every y, or None if there is none.

    Which witness comes first depends on the iteration order of the set. Uniqueness is not checked.
    """
    for x in elements:
        if all(x.operate(y) == y for y in elements):
            return x

    return None


def inverses[T: Operator](elements: AbstractSet[T]) -> Optional[Dict[T, T]]:
    """
    Returns the mapping from every element x to the y with x.operate(y) == identity.

    The mapping is only returned when it is a bijection of the set onto itself: exactly as many (x, y) pairs as
    there are elements, with both sides covering the whole set. Otherwise returns None.
    """
    e = identity(elements)
    if e is None:
        return None

    pairs: List[Tuple[T, T]] = []
    for x in elements:
        for y in elements:
            if x.operate(y) == e:
                pairs.append((x, y))

    if len(pairs) != len(elements):
        logger.debug("Failed inverse assertion: %d inverse pairs for %d elements", len(pairs), len(elements))

        return None

    lefts = {x for x, _ in pairs}
    rights = {y for _, y in pairs}
    if lefts != rights or rights != set(elements):
        logger.debug("Failed inverse assertion: inverse pairs do not cover the set, %r != %r", lefts, rights)

        return None

    return dict(pairs)


def is_a_group[T: Operator](elements: AbstractSet[T]) -> bool:
    """Returns whether the set is non-empty and satisfies all four group axioms."""
    return (
        len(elements) > 0
        and is_closed(elements)
        and is_associative(elements)
        and identity(elements) is not None
        and inverses(elements) is not None
    )

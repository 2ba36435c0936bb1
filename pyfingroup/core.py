from abc import abstractmethod
from typing import Callable, FrozenSet, Hashable, Iterable, Protocol, TypeVar

T = TypeVar("T")


class Operator(Protocol[T]):
    """
    This protocol defines the single capability an element needs to be checked against the group axioms:
    operating with another element of the same type to produce a new one.

    Implementors must also provide __eq__ and a __hash__ consistent with it, since carrier sets are plain sets.
    """

    @abstractmethod
    def operate(self, operand: T) -> T:
        raise NotImplementedError


type BinaryOperation[V: Hashable] = Callable[[V, V], V]


class Operand[V: Hashable](Operator["Operand[V]"]):
    """
    Lifts a plain value into an Operator by carrying the binary operation alongside it.

    Two operands are equal if their values are equal. The operation takes no part in equality or hashing, so
    every operand of a carrier set is expected to share the same one.
    """

    value: V
    op: BinaryOperation[V]

    def __init__(self, value: V, op: BinaryOperation[V]) -> None:
        self.value = value
        self.op = op

    def operate(self, operand: "Operand[V]") -> "Operand[V]":
        """Applies the carried operation to both values, self on the left."""
        return Operand(self.op(self.value, operand.value), self.op)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Operand):
            return False

        return self.value == other.value  # type: ignore

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Operand({self.value!r})"


def operands[V: Hashable](values: Iterable[V], op: BinaryOperation[V]) -> FrozenSet[Operand[V]]:
    """Builds a carrier set out of plain values that all share the operation op."""
    return frozenset(Operand(value, op) for value in values)

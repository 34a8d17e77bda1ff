from typing import Protocol, Sequence


class Air(Protocol):
    """The view of an AIR used by a proving backend."""

    def width(self) -> int: ...

    def num_public_inputs(self) -> int: ...

    def eval(self, row: Sequence, is_last_row: bool) -> list: ...


class ProvingBackend(Protocol):
    """A backend producing and checking proofs that a trace satisfies an AIR."""

    def prove(self, air: Air, trace, public_inputs: Sequence[int]): ...

    def verify(self, air: Air, proof, public_inputs: Sequence[int]) -> bool: ...

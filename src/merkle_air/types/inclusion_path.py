from dataclasses import dataclass
from typing import Iterable, Iterator

from merkle_air.util.hash_functions import DIGEST_SIZE, is_digest


@dataclass(frozen=True)
class InclusionStep:
    direction: int
    sibling: bytes

    def __post_init__(self):
        if self.direction not in (0, 1):
            msg = f"The direction bit must be 0 or 1: direction: {self.direction}"
            raise ValueError(msg)
        if not is_digest(self.sibling):
            msg = f"The sibling must be a {DIGEST_SIZE}-byte digest: sibling: {self.sibling!r}"
            raise ValueError(msg)
        object.__setattr__(self, "direction", int(self.direction))
        object.__setattr__(self, "sibling", bytes(self.sibling))

    def order(self, current: bytes) -> tuple[bytes, bytes]:
        """Return the pair `(left, right)` hashed at this step when `current` is the node being lifted."""
        return (current, self.sibling) if self.direction == 0 else (self.sibling, current)


@dataclass(frozen=True)
class InclusionPath:
    steps: tuple[InclusionStep, ...]

    def __post_init__(self):
        steps = tuple(self.steps)
        if len(steps) == 0:
            msg = "The inclusion path must contain at least one step."
            raise ValueError(msg)
        if not all(isinstance(step, InclusionStep) for step in steps):
            msg = f"The inclusion path must be made of InclusionStep instances: steps: {steps}"
            raise ValueError(msg)
        object.__setattr__(self, "steps", steps)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, bytes]]) -> "InclusionPath":
        """Build an inclusion path from `(direction, sibling)` pairs, ordered from the leaf to the root."""
        return cls(tuple(InclusionStep(direction, sibling) for direction, sibling in pairs))

    def to_pairs(self) -> list[tuple[int, bytes]]:
        """Return the `(direction, sibling)` pairs of the path, ordered from the leaf to the root."""
        return [(step.direction, step.sibling) for step in self.steps]

    @property
    def depth(self) -> int:
        return len(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[InclusionStep]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> InclusionStep:
        return self.steps[index]

from dataclasses import dataclass


@dataclass(frozen=True)
class Proof:
    """Proof produced by `TransparentBackend`.

    Attributes:
        width (int): The number of columns of the committed trace.
        commitment (bytes): The Merkle root of the rows of the trace.
        rows (tuple[tuple[int, ...], ...]): The rows of the trace, as canonical integers.
        public_inputs (tuple[int, ...]): The public inputs the proof was produced for.
    """

    width: int
    commitment: bytes
    rows: tuple[tuple[int, ...], ...]
    public_inputs: tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))
        object.__setattr__(self, "public_inputs", tuple(self.public_inputs))

    def serialise(self) -> dict:
        """Return a JSON-compatible representation of the proof."""
        return {
            "width": self.width,
            "commitment": self.commitment.hex(),
            "rows": [list(row) for row in self.rows],
            "public_inputs": list(self.public_inputs),
        }

    @classmethod
    def deserialise(cls, data: dict) -> "Proof":
        """Inverse of `serialise`.

        Raises:
            ValueError: If `data` is missing a field or a field is malformed.
        """
        try:
            return cls(
                width=int(data["width"]),
                commitment=bytes.fromhex(data["commitment"]),
                rows=tuple(tuple(int(cell) for cell in row) for row in data["rows"]),
                public_inputs=tuple(int(x) for x in data.get("public_inputs", [])),
            )
        except (KeyError, TypeError) as e:
            msg = f"Malformed proof: {e}"
            raise ValueError(msg) from e

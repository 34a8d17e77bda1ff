import logging
from typing import Sequence

from merkle_air.backend.commitment import commit_rows
from merkle_air.backend.errors import ProofRejectedError, ProvingError
from merkle_air.backend.interface import Air
from merkle_air.backend.proof import Proof
from merkle_air.fields.mersenne31 import MERSENNE31_MODULUS, Mersenne31, is_canonical, to_field_row
from merkle_air.trace.trace_builder import Trace

logger = logging.getLogger(__name__)


class TransparentBackend:
    """Reference proving backend that discloses the trace.

    The proof carries the rows of the trace and a Merkle commitment to them. The verifier recomputes the commitment
    and evaluates every constraint of its own AIR instance on every row, so a proof only verifies against an AIR the
    trace satisfies. The proofs are neither succinct nor zero knowledge.

    Attributes:
        field: The field in which the constraints are evaluated. Defaults to `Mersenne31`.
        modulus (int): The characteristic of `field`; every cell of the trace must lie in `[0, modulus)`.
    """

    def __init__(self, field=Mersenne31, modulus: int = MERSENNE31_MODULUS):
        self.field = field
        self.modulus = modulus

    def _unsatisfied(self, air: Air, rows: Sequence[Sequence[int]]) -> tuple[int, list[int]] | None:
        """Return the first row violating `air` with the indices of its failing constraints, or `None`."""
        last = len(rows) - 1
        for i, row in enumerate(rows):
            constraints = air.eval(to_field_row(row, self.field), is_last_row=(i == last))
            failing = [j for j, constraint in enumerate(constraints) if not constraint.is_zero()]
            if failing:
                return i, failing
        return None

    def _check_shape(self, air: Air, rows: Sequence[Sequence[int]], width: int, public_inputs: Sequence[int]) -> str:
        """Return the reason `rows` cannot be checked against `air`, or the empty string."""
        if len(public_inputs) != air.num_public_inputs():
            return f"expected {air.num_public_inputs()} public inputs, got {len(public_inputs)}"
        if len(rows) == 0:
            return "the trace is empty"
        if width != air.width():
            return f"the trace has width {width}, the AIR expects {air.width()}"
        for i, row in enumerate(rows):
            if len(row) != width:
                return f"row {i} has width {len(row)}, expected {width}"
            if not all(is_canonical(cell, self.modulus) for cell in row):
                return f"row {i} contains a value outside [0, {self.modulus})"
        return ""

    def prove(self, air: Air, trace: Trace, public_inputs: Sequence[int]) -> Proof:
        """Produce a proof that `trace` satisfies `air`.

        Args:
            air (Air): The AIR the trace must satisfy.
            trace (Trace): The execution trace.
            public_inputs (Sequence[int]): The public inputs, empty for `InclusionAir`.

        Returns:
            The proof.

        Raises:
            ProvingError: If the trace does not have the shape expected by `air` or violates one of its constraints.
        """
        rows = trace.rows
        reason = self._check_shape(air, rows, trace.width, public_inputs)
        if reason:
            raise ProvingError(reason)

        unsatisfied = self._unsatisfied(air, rows)
        if unsatisfied is not None:
            row, failing = unsatisfied
            msg = f"row {row} violates constraints {failing}"
            raise ProvingError(msg)

        proof = Proof(width=trace.width, commitment=commit_rows(rows), rows=rows, public_inputs=tuple(public_inputs))
        logger.info("Proved trace of %d rows, commitment %s", len(rows), proof.commitment.hex())

        return proof

    def verify(self, air: Air, proof: Proof, public_inputs: Sequence[int]) -> bool:
        """Verify that `proof` proves a trace satisfying `air`.

        Args:
            air (Air): The verifier's own AIR instance.
            proof (Proof): The proof to check.
            public_inputs (Sequence[int]): The public inputs used at proving time.

        Returns:
            `True` if the proof is accepted.

        Raises:
            ProofRejectedError: If the proof is rejected. The reason is available as `reason`.
        """
        if tuple(public_inputs) != proof.public_inputs:
            msg = "the public inputs do not match the proof"
            raise ProofRejectedError(msg)

        reason = self._check_shape(air, proof.rows, proof.width, public_inputs)
        if reason:
            raise ProofRejectedError(reason)

        if commit_rows(proof.rows) != proof.commitment:
            msg = "the commitment does not match the rows"
            raise ProofRejectedError(msg)

        unsatisfied = self._unsatisfied(air, proof.rows)
        if unsatisfied is not None:
            row, failing = unsatisfied
            msg = f"row {row} violates constraints {failing}"
            raise ProofRejectedError(msg)

        logger.info("Verified proof with commitment %s", proof.commitment.hex())

        return True

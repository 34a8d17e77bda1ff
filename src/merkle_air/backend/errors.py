class BackendError(Exception):
    """Base class of the errors raised by a proving backend."""


class ProvingError(BackendError):
    """The backend refused to produce a proof, e.g. because the trace does not satisfy the AIR."""


class ProofRejectedError(BackendError):
    """The verifier rejected the proof.

    Attributes:
        reason (str): Why the proof was rejected.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

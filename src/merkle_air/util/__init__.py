"""Utility package.

Stateless helpers shared by the trace builder, the AIR and the proving backend:

- `hash_functions`: the SHA-256 hash collaborator and digest size constants.
- `bit_encoding`: conversion between digests and lists of 0/1 scalars.
- `log`: opt-in logging configuration for drivers. Library modules only create loggers.
"""

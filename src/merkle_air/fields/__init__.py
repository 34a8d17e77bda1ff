"""Fields package.

The trace cells and the constraint values of the AIR live in the Mersenne-31 prime field `F_p`, `p = 2^31 - 1`.
The field class is built with the `elliptic_curves` package; `mersenne31` also provides helpers converting rows of
integers to rows of field elements and back.
"""

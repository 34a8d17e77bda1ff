class ConstraintBuilder:
    """Accumulate the constraint values of one row of the trace.

    Every constraint is a field element that must be zero for the row to be accepted. Constraints added through a
    builder returned by `when` are multiplied by the selector of that builder, so they vanish on rows where the
    selector is zero.

    Attributes:
        field: The field in which the constraints are evaluated.
        selector: The field element multiplying every constraint added through this builder.
        constraints (list): The constraint values accumulated so far, shared between a builder and the builders
            derived from it with `when`.
    """

    def __init__(self, field, selector=None, constraints: list | None = None):
        self.field = field
        self.selector = field.identity() if selector is None else selector
        self.constraints = [] if constraints is None else constraints

    def _to_field(self, value):
        return self.field(int(value)) if isinstance(value, int) else value

    def when(self, condition) -> "ConstraintBuilder":
        """Return a builder whose constraints only apply when `condition` is non-zero."""
        return ConstraintBuilder(self.field, self.selector * self._to_field(condition), self.constraints)

    def assert_zero(self, x) -> None:
        self.constraints.append(self.selector * self._to_field(x))

    def assert_eq(self, x, y) -> None:
        self.assert_zero(self._to_field(x) - self._to_field(y))

    def assert_bool(self, x) -> None:
        """Add the constraint `x * (1 - x) = 0`."""
        x = self._to_field(x)
        self.assert_zero(x * (self.field.identity() - x))

    def failing(self) -> list[int]:
        """Return the indices of the constraints that are not satisfied."""
        return [i for i, constraint in enumerate(self.constraints) if not constraint.is_zero()]

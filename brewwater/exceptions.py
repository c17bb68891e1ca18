class InvalidInput(ValueError):
    """Raised when a volume or profile value is not physically meaningful.

    The offending field is available as the `field` attribute, e.g.
    'volume' or 'base.calcium'.

    """
    def __init__(self, field, reason):
        self.field = field
        self.reason = reason
        super(InvalidInput, self).__init__('{0:s} {1:s}'.format(field, reason))


class SolverContractViolation(RuntimeError):
    """Raised when the solver returns a point violating the constraints."""
    pass

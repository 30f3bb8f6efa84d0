# errors raised by the fib register machines


class FibError(Exception):
    pass


class ContractViolation(FibError):
    pass


class NegativeArgumentError(ContractViolation, ValueError):
    def __init__(self, n):
        super().__init__("fib is undefined for negative n: %r" % (n,))
        self.n = n


class InvalidArgumentError(ContractViolation, TypeError):
    def __init__(self, n):
        super().__init__("fib needs an int, got %s" % type(n).__name__)
        self.n = n


class FrameStackError(FibError):
    pass


class FrameStackExhausted(FrameStackError, MemoryError):
    """The frame stack could not grow to hold another frame."""

    def __init__(self, depth, limit=None):
        if limit is None:
            msg = "out of memory with %d live frames" % depth
        else:
            msg = "frame stack limit of %d reached" % limit
        super().__init__(msg)
        self.depth = depth
        self.limit = limit

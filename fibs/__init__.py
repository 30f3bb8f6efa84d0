from .errors import (
    ContractViolation,
    FibError,
    FrameStackError,
    FrameStackExhausted,
    InvalidArgumentError,
    NegativeArgumentError,
)
from .framed_stack import Frame, Stack, State, evaluate, fib

__version__ = "0.1.0"

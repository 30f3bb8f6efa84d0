# fib register machine with an explicit stack of tagged frames
#
# Each frame is one pending call of fib(n) = fib(n-1) + fib(n-2). Its
# state says which sub-call it is waiting on; value_reg carries the value
# of the frame that was just finished to the frame that resumes next.

import collections
import enum
import logging
from dataclasses import dataclass

from .errors import (
    FrameStackError,
    FrameStackExhausted,
    InvalidArgumentError,
    NegativeArgumentError,
)

logger = logging.getLogger(__name__)


class State(enum.Enum):
    INIT = "init"
    AWAITING_FIRST = "awaiting-first"
    AWAITING_SECOND = "awaiting-second"


# state -> state it moves to once its sub-call has been pushed;
# AWAITING_SECOND frames are finished and never pushed back
TRANSITIONS = {
    State.INIT: State.AWAITING_FIRST,
    State.AWAITING_FIRST: State.AWAITING_SECOND,
}


@dataclass
class Frame:
    n: int
    state: State = State.INIT
    partial_result: int = 0


class Stack(collections.deque):
    """
    LIFO of frames, pushed and popped at the tail.

    `max_depth` records the most frames ever live at once. With a
    `limit`, pushing past it raises FrameStackExhausted.
    """

    def __init__(self, limit=None):
        super().__init__()
        self.limit = limit
        self.max_depth = 0

    def push(self, frame):
        if self.limit is not None and len(self) >= self.limit:
            raise FrameStackExhausted(len(self), self.limit)
        try:
            self.append(frame)
        except MemoryError:
            raise FrameStackExhausted(len(self)) from None
        if len(self) > self.max_depth:
            self.max_depth = len(self)

    def pop(self):
        if not self:
            raise FrameStackError("cannot pop an empty stack")
        return super().pop()

    def peek(self):
        return self[-1] if self else None


def evaluate(n, limit=None, on_step=None):
    """
    Compute the nth Fibonacci number without recursing in Python.

    `limit` caps the number of live frames (None means grow as needed).
    `on_step(frame, stack)` is called with every frame popped, before
    the frame is acted on.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(n)
    if n < 0:
        raise NegativeArgumentError(n)
    if n <= 1:
        return n

    logger.debug("evaluating fib(%d)", n)
    k_reg = Stack(limit)
    value_reg = 0
    try:
        k_reg.push(Frame(n))
        while k_reg:
            frame = k_reg.pop()
            logger.debug("pop n=%d state=%s depth=%d",
                         frame.n, frame.state.value, len(k_reg))
            if on_step is not None:
                on_step(frame, k_reg)

            if frame.state is State.INIT:
                if frame.n <= 1:
                    value_reg = frame.n
                else:
                    frame.state = TRANSITIONS[frame.state]
                    k_reg.push(frame)
                    k_reg.push(Frame(frame.n - 1))
            elif frame.state is State.AWAITING_FIRST:
                frame.partial_result += value_reg
                frame.state = TRANSITIONS[frame.state]
                k_reg.push(frame)
                k_reg.push(Frame(frame.n - 2))
            elif frame.state is State.AWAITING_SECOND:
                frame.partial_result += value_reg
                value_reg = frame.partial_result
            else:
                raise FrameStackError("unknown frame state: %r" % (frame.state,))
        logger.debug("fib(%d) = %d, peak depth %d", n, value_reg, k_reg.max_depth)
    finally:
        k_reg.clear()
    return value_reg


fib = evaluate

import logging

from .errors import FibError
from .framed_stack import evaluate

logger = logging.getLogger(__name__)

N = 10


def main(argv=None):
    logging.basicConfig(level=logging.WARNING,
                        format="%(name)s: %(levelname)s: %(message)s")
    try:
        result = evaluate(N)
    except FibError as e:
        logger.error("fib(%d) failed: %s", N, e)
        return 1
    print("Fibonacci(%d) = %d" % (N, result))
    return 0

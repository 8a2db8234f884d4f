import threading


class EvaluationError(Exception):
    """Raised when a user function fails on an element."""


class NoSuchElementError(LookupError):
    """Raised when no element satisfies a lookup."""


class EmptySequenceError(NoSuchElementError, ValueError):
    """Raised when an operation requires at least one element."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors raised by user functions (predicates,
            transforms, selectors...) called by ArrayList are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through ArrayList
              code, might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def evaluate(where, index, func, *args):
    """Call `func(*args)` on behalf of operation `where`.

    Failures are reported according to :func:`seterr`, `index` is the
    position of the element being processed.
    """
    try:
        return func(*args)

    except Exception as cause:
        if seterr() == 'passthrough' or isinstance(cause, EvaluationError):
            raise
        else:
            msg = "Failed to evaluate item {} in {}".format(index, where)
            raise EvaluationError(msg) from cause

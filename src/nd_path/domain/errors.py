# nd_path/domain/errors.py
"""
Errors raised by graph construction and shortest-path queries.

None of them are retryable: fix the input (or reset the graph) and run a fresh
computation.
"""


class NdPathError(Exception):
    """Base exception for the package."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class GraphInputError(NdPathError, ValueError):
    """Bad vertex data or bad query arguments."""


class DimensionMismatch(GraphInputError):
    def __init__(self, left: int, right: int):
        self.left, self.right = left, right
        super().__init__(f"cannot compare positions of dimension {left} and {right}")


class UnknownConnectionTarget(GraphInputError):
    def __init__(self, key: int, target: int):
        self.key, self.target = key, target
        super().__init__(f"vertex {key!r} connects to unknown vertex {target!r}")


class DuplicateVertexKey(GraphInputError):
    def __init__(self, key: int):
        self.key = key
        super().__init__(f"vertex key {key!r} appears more than once")


class StartNotFound(GraphInputError):
    def __init__(self, ref):
        self.ref = ref
        super().__init__(f"cannot find start node for {ref!r}")


class FinishNotFound(GraphInputError):
    def __init__(self, ref):
        self.ref = ref
        super().__init__(f"cannot find finish node for {ref!r}")


class NoPath(NdPathError):
    """Relaxation exhausted every reachable node without reaching the finish."""

    def __init__(self, start_key: int, finish_key: int):
        self.start_key, self.finish_key = start_key, finish_key
        super().__init__(
            f"there is no connection between nodes of key {start_key!r} and {finish_key!r}"
        )


class GraphStateError(NdPathError, RuntimeError):
    pass


class StaleGraph(GraphStateError):
    def __init__(self):
        super().__init__("graph was consumed by a previous run; call reset() before reuse")

# runtime/hooks.py
from typing import Protocol


class EngineHooks(Protocol):
    def run_start(self, *, start_key, finish_key, nodes): ...
    def finalize(self, key, *, best, order): ...
    def run_end(self, *, start_key, finish_key, total, steps, finalized, wall_ms): ...
    def error(self, *, start_key, finish_key, exc: BaseException, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def finalize(self, *_, **__):
        pass

    def run_end(self, **_):
        pass

    def error(self, **_):
        pass

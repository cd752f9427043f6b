# io/engine_logging.py
import json
import logging
import sys

from nd_path.runtime.hooks import NoopHooks


def _default_json_logger(name="nd_path", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class EngineLogging(NoopHooks):
    """
    Structured logs for shortest-path runs.
    run_start/run_end at INFO, per-node finalization at DEBUG (sampled, debug only),
    failures at ERROR.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def run_start(self, *, start_key, finish_key, nodes):
        self._emit("INFO", "run_start", start=start_key, finish=finish_key, nodes=nodes)

    def finalize(self, key, *, best, order):
        if self.debug and (order % self.sample_every) == 0:
            self._emit("DEBUG", "finalize", key=key, best=best, order=order)

    def run_end(self, *, start_key, finish_key, total, steps, finalized, wall_ms):
        self._emit(
            "INFO",
            "run_end",
            start=start_key,
            finish=finish_key,
            total=total,
            steps=steps,
            finalized=finalized,
            wall_ms=wall_ms,
        )

    def error(self, *, start_key, finish_key, exc: BaseException, **extra):
        self._emit(
            "ERROR",
            "engine_error",
            start=start_key,
            finish=finish_key,
            error=type(exc).__name__,
            detail=str(exc),
            **extra,
        )

"""Sampling for log statements emitted from the frame loop.

A scene ticking at 60 fps would otherwise flood the log with one
``scene.frame`` record per frame. Each call site passes a stable ``key``;
the controller emits the record at its primary level at most once per
interval and demotes the rest to ``fallback_level`` (or drops them).

Rules come from ``SAILOR_LOG_RULES`` as comma separated
``key=interval[:LEVEL]`` entries, where ``interval`` is seconds or ``none``
to disable sampling for that key.
"""

from __future__ import annotations

import logging
import os
import re
import time
from dataclasses import dataclass
from functools import cache
from typing import Callable, Sequence

LOG_RULES_ENV_VAR = "SAILOR_LOG_RULES"
DEFAULT_INTERVAL_ENV_VAR = "SAILOR_LOG_DEFAULT_INTERVAL"
DEFAULT_FALLBACK_LEVEL = logging.DEBUG
DEFAULT_INTERVAL_SECONDS = 1.0

_RULE_PATTERN = re.compile(
    r"^(?P<key>[^=]+)=(?P<interval>none|\d+(?:\.\d+)?)(?::(?P<level>[A-Za-z]+))?$"
)

@dataclass(frozen=True)
class LogRule:
    interval_seconds: float | None
    level: int | None

class LoggingController:
    """Rate limit log records per key."""

    def __init__(
        self,
        *,
        default_interval: float | None,
        default_fallback_level: int | None,
        rules: dict[str, LogRule],
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_interval = default_interval
        self._default_fallback_level = default_fallback_level
        self._rules = rules
        self._monotonic = monotonic
        self._next_emit: dict[str, float] = {}

    def _rule_for(self, key: str) -> LogRule:
        return self._rules.get(
            key, LogRule(interval_seconds=self._default_interval, level=None)
        )

    def log(
        self,
        *,
        key: str,
        logger: logging.Logger,
        level: int,
        msg: str,
        args: Sequence[object] | None = None,
        extra: dict[str, object] | None = None,
        fallback_level: int | None = None,
    ) -> bool:
        """Emit ``msg`` honouring the sampling rule for ``key``.

        Returns ``True`` when the record went out at the primary level.
        """

        rule = self._rule_for(key)
        primary_level = rule.level or level
        if rule.interval_seconds is None:
            logger.log(primary_level, msg, *(args or ()), extra=extra)
            return True

        now = self._monotonic()
        if now >= self._next_emit.get(key, 0.0):
            self._next_emit[key] = now + rule.interval_seconds
            logger.log(primary_level, msg, *(args or ()), extra=extra)
            return True

        demoted = (
            fallback_level
            if fallback_level is not None
            else self._default_fallback_level
        )
        if demoted is not None:
            logger.log(demoted, msg, *(args or ()), extra=extra)
        return False

def _parse_level(name: str | None) -> int | None:
    if not name:
        return None
    resolved = getattr(logging, name.upper(), None)
    if isinstance(resolved, int):
        return resolved
    raise ValueError(f"Unknown log level {name!r}")

def _parse_interval(value: str) -> float | None:
    if value.lower() == "none":
        return None
    return float(value)

def parse_rules(raw_rules: str) -> dict[str, LogRule]:
    rules: dict[str, LogRule] = {}
    for chunk in filter(None, (part.strip() for part in raw_rules.split(","))):
        match = _RULE_PATTERN.match(chunk)
        if not match:
            raise ValueError(
                f"Invalid {LOG_RULES_ENV_VAR} entry {chunk!r}. "
                "Expected 'key=interval[:LEVEL]'."
            )
        rules[match.group("key").strip()] = LogRule(
            interval_seconds=_parse_interval(match.group("interval")),
            level=_parse_level(match.group("level")),
        )
    return rules

@cache
def get_logging_controller() -> LoggingController:
    """Return the shared logging controller instance."""

    default_interval_raw = os.getenv(DEFAULT_INTERVAL_ENV_VAR)
    default_interval = (
        DEFAULT_INTERVAL_SECONDS
        if default_interval_raw is None
        else _parse_interval(default_interval_raw)
    )
    return LoggingController(
        default_interval=default_interval,
        default_fallback_level=DEFAULT_FALLBACK_LEVEL,
        rules=parse_rules(os.getenv(LOG_RULES_ENV_VAR, "")),
    )

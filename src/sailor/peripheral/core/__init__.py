from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import cached_property
from typing import Any, Generic, Iterator, Mapping, Self, TypeVar

import reactivex
from reactivex import operators as ops

from sailor.utilities.logging import get_logger


@dataclass(slots=True)
class Input:
    """Normalized structure for messages forwarded to peripherals."""

    event_type: str
    data: Any
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


A = TypeVar("A")


@dataclass
class PeripheralInfo:
    id: str | None = None
    kind: str | None = None


@dataclass
class PeripheralMessageEnvelope(Generic[A]):
    peripheral_info: PeripheralInfo
    data: A

    @classmethod
    def unwrap_peripheral(cls, wrapper: PeripheralMessageEnvelope[A]) -> A:
        return wrapper.data


class Peripheral(Generic[A]):
    """Abstract base class for all peripherals."""

    _logger = get_logger(__name__)

    def _event_stream(self) -> reactivex.Observable[A]:
        return reactivex.empty()

    def peripheral_info(self) -> PeripheralInfo:
        return PeripheralInfo(kind=type(self).__name__)

    @cached_property
    def observe(self) -> reactivex.Observable[PeripheralMessageEnvelope[A]]:
        info = self.peripheral_info()

        def wrap(a: A) -> PeripheralMessageEnvelope[A]:
            return PeripheralMessageEnvelope[A](data=a, peripheral_info=info)

        return self._event_stream().pipe(ops.map(wrap), ops.share())

    @classmethod
    def detect(cls) -> Iterator[Self]:
        raise NotImplementedError("'detect' is not implemented")

    def handle_input(self, input: Input) -> None:
        """React to an input forwarded by the runtime; the default ignores it."""

    def needs_thread(self) -> bool:
        """Whether :meth:`run` blocks and must be started on its own thread."""

        return False

    def run(self) -> None:
        pass

    def update_due_to_data(self, data: Mapping[str, Any]) -> None:
        """Convert a raw mapping with ``event_type``/``data`` keys into an :class:`Input`."""

        try:
            self.handle_input(Input(**data))
        except TypeError:
            self._logger.debug(
                "Ignoring malformed peripheral payload: %s", data, exc_info=True
            )

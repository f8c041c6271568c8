import logging

import pytest

from sailor.utilities import logging_control


class StubLogger:
    def __init__(self) -> None:
        self.records: list[tuple[int, str, tuple[object, ...], dict[str, object] | None]] = []

    def log(
        self,
        level: int,
        msg: str,
        *args: object,
        extra: dict[str, object] | None = None,
    ) -> None:
        self.records.append((level, msg, tuple(args), extra))


@pytest.fixture(autouse=True)
def reset_logging_controller_cache() -> None:
    logging_control.get_logging_controller.cache_clear()  # type: ignore[attr-defined]
    yield
    logging_control.get_logging_controller.cache_clear()  # type: ignore[attr-defined]


def test_logging_controller_applies_interval() -> None:
    """Verify per-key intervals throttle per-frame logs."""
    monotonic_values = [0.0]

    controller = logging_control.LoggingController(
        default_interval=1.0,
        default_fallback_level=logging.DEBUG,
        rules={},
        monotonic=lambda: monotonic_values[0],
    )
    logger = StubLogger()

    emitted = controller.log(
        key="scene.frame",
        logger=logger,
        level=logging.INFO,
        msg="scene.frame %s",
        args=("primary",),
    )
    assert emitted is True
    assert logger.records[-1][0] == logging.INFO

    emitted = controller.log(
        key="scene.frame",
        logger=logger,
        level=logging.INFO,
        msg="scene.frame %s",
        args=("secondary",),
    )
    assert emitted is False
    assert logger.records[-1][0] == logging.DEBUG

    monotonic_values[0] = 1.0
    emitted = controller.log(
        key="scene.frame",
        logger=logger,
        level=logging.INFO,
        msg="scene.frame %s",
        args=("tertiary",),
    )
    assert emitted is True
    assert logger.records[-1][0] == logging.INFO


def test_logging_controller_keys_are_independent() -> None:
    controller = logging_control.LoggingController(
        default_interval=10.0,
        default_fallback_level=None,
        rules={},
        monotonic=lambda: 0.0,
    )
    logger = StubLogger()

    assert controller.log(key="scene.frame", logger=logger, level=logging.INFO, msg="a")
    assert controller.log(key="renderer.frame", logger=logger, level=logging.INFO, msg="b")
    assert not controller.log(key="scene.frame", logger=logger, level=logging.INFO, msg="c")
    assert [record[1] for record in logger.records] == ["a", "b"]


def test_logging_controller_respects_rule_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Confirm env rules disable sampling and override the level."""
    monkeypatch.setenv("SAILOR_LOG_RULES", "renderer.frame=none:WARNING")
    controller = logging_control.get_logging_controller()
    logger = StubLogger()

    for _ in range(3):
        emitted = controller.log(
            key="renderer.frame",
            logger=logger,
            level=logging.DEBUG,
            msg="renderer.frame",
        )
        assert emitted is True

    assert [record[0] for record in logger.records] == [logging.WARNING] * 3


def test_parse_rules_rejects_malformed_entries() -> None:
    with pytest.raises(ValueError, match="key=interval"):
        logging_control.parse_rules("scene.frame")


def test_parse_rules_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        logging_control.parse_rules("scene.frame=1:LOUD")

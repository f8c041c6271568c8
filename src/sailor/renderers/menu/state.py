"""Radial effect menu pinned to the top-right corner.

Closed, four icons orbit a transparent hub; tapping the hub opens a card with
one button per :class:`MenuAction`. Picking a button closes the card before
the action is applied.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import StrEnum

from sailor.animation import InfiniteTransition, SpringDamper, Tween
from sailor.animation.spring import STIFFNESS_MEDIUM_LOW
from sailor.renderers.sky.state import SkyStateMachine
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

HUB_SIZE_DP = 48.0
HUB_TOP_DP = 80.0
HUB_END_DP = 48.0
ORBIT_RADIUS_DP = 18.0
ICON_SIZE_DP = 24.0
ORBIT_PERIOD_MS = 4000.0

CARD_ALPHA_MS = 300.0
CARD_PADDING_DP = 16.0
CARD_CORNER_DP = 16.0
CARD_HIDDEN_OFFSET_DP = -50.0
BUTTON_SIZE_DP = 48.0
BUTTON_SPACING_DP = 8.0

Point = tuple[float, float]


class MenuAction(StrEnum):
    TOGGLE_CLOUDS = "toggle_clouds"
    GO_TO_DAY_SIDE = "go_to_day_side"
    TOGGLE_RAIN = "toggle_rain"
    BRIGHTNESS_CYCLE = "brightness_cycle"


MENU_BUTTONS: tuple[MenuAction, ...] = (
    MenuAction.TOGGLE_CLOUDS,
    MenuAction.GO_TO_DAY_SIDE,
    MenuAction.TOGGLE_RAIN,
    MenuAction.BRIGHTNESS_CYCLE,
)


@dataclass(frozen=True, slots=True)
class EffectToggles:
    show_clouds: bool = False
    show_rain: bool = False


@dataclass(frozen=True, slots=True)
class Box:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)

    def contains(self, point: Point) -> bool:
        x, y = point
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass(frozen=True)
class MenuLayout:
    hub: Box
    card: Box
    buttons: tuple[Box, ...]


def menu_layout(width: float, density: float, card_offset_dp: float = 0.0) -> MenuLayout:
    right = width - HUB_END_DP * density
    top = HUB_TOP_DP * density
    hub_size = HUB_SIZE_DP * density
    hub = Box(right - hub_size, top, hub_size, hub_size)

    padding = CARD_PADDING_DP * density
    button = BUTTON_SIZE_DP * density
    spacing = BUTTON_SPACING_DP * density
    count = len(MENU_BUTTONS)
    card_width = button + 2 * padding
    card_height = count * button + (count - 1) * spacing + 2 * padding
    card = Box(right - card_width, top + card_offset_dp * density, card_width, card_height)
    buttons = tuple(
        Box(card.left + padding, card.top + padding + index * (button + spacing), button, button)
        for index in range(count)
    )
    return MenuLayout(hub=hub, card=card, buttons=buttons)


@dataclass(frozen=True, slots=True)
class MenuHit:
    consumed: bool
    action: MenuAction | None = None


@dataclass
class MenuController:
    is_open: bool = False
    orbit: InfiniteTransition = field(
        default_factory=lambda: InfiniteTransition(period_ms=ORBIT_PERIOD_MS)
    )
    card_alpha: Tween = field(
        default_factory=lambda: Tween(value=0.0, duration_ms=CARD_ALPHA_MS)
    )
    card_offset: SpringDamper = field(
        default_factory=lambda: SpringDamper(
            stiffness=STIFFNESS_MEDIUM_LOW,
            damping_ratio=1.0,
            value=CARD_HIDDEN_OFFSET_DP,
        )
    )

    def layout(self, width: float, density: float) -> MenuLayout:
        return menu_layout(width, density, self.card_offset.value)

    def open(self) -> None:
        self.is_open = True
        self.card_alpha.snap_to(0.0)
        self.card_alpha.animate_to(1.0)
        self.card_offset.value = CARD_HIDDEN_OFFSET_DP
        self.card_offset.velocity = 0.0
        logger.info("Menu opened")

    def close(self) -> None:
        self.is_open = False
        self.card_alpha.snap_to(0.0)
        logger.info("Menu closed")

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def handle_tap(self, point: Point, width: float, density: float) -> MenuHit:
        """Resolve a tap against the menu; unconsumed taps fall through to the scene."""

        layout = self.layout(width, density)
        if not self.is_open:
            if layout.hub.contains(point):
                self.open()
                return MenuHit(consumed=True)
            return MenuHit(consumed=False)

        for action, button in zip(MENU_BUTTONS, layout.buttons):
            if button.contains(point):
                self.close()
                return MenuHit(consumed=True, action=action)
        if layout.card.contains(point) or layout.hub.contains(point):
            self.close()
            return MenuHit(consumed=True)
        return MenuHit(consumed=False)

    def update(self, dt_ms: float) -> None:
        self.orbit.advance(dt_ms)
        self.card_alpha.advance(dt_ms)
        if self.is_open:
            self.card_offset.step(0.0, dt_ms / 1000.0)

    def orbit_positions(self, width: float, density: float) -> list[Point]:
        cx, cy = menu_layout(width, density).hub.center
        radius = ORBIT_RADIUS_DP * density
        count = len(MENU_BUTTONS)
        positions = []
        for index in range(count):
            angle = math.radians(self.orbit.fraction * 360.0 + index * 360.0 / count)
            positions.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
        return positions

    @staticmethod
    def apply(action: MenuAction, sky: SkyStateMachine, toggles: EffectToggles) -> EffectToggles:
        """Apply ``action``; the returned toggles replace the scene's."""

        logger.info("Menu action %s", action.value)
        match action:
            case MenuAction.TOGGLE_CLOUDS:
                return replace(toggles, show_clouds=not toggles.show_clouds)
            case MenuAction.TOGGLE_RAIN:
                return replace(toggles, show_rain=not toggles.show_rain)
            case MenuAction.BRIGHTNESS_CYCLE:
                sky.brightness_cycle()
                return toggles
            case MenuAction.GO_TO_DAY_SIDE:
                sky.go_to_day_side()
                return replace(toggles, show_clouds=False)
        return toggles

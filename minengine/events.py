"""Window, keyboard and mouse events, with a dispatcher that routes them by type."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, ClassVar, TypeVar


class EventType(enum.IntEnum):
    """Kinds of event the engine produces."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(enum.IntFlag):
    """Bit flags grouping events by their source."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _fmt_number(value: float) -> str:
    """Format a number the way a default-configured text stream would."""
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


@dataclass
class Event:
    """Base of every event; concrete subclasses define ``event_type`` and ``name``."""

    event_type: ClassVar[EventType]
    name: ClassVar[str]
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = field(default=False, kw_only=True, compare=False)

    def __post_init__(self) -> None:
        if "event_type" not in _class_attrs(type(self)):
            raise TypeError(f"{type(self).__name__} is not a concrete event type")

    def is_in_category(self, category: EventCategory) -> bool:
        """Return True if this event belongs to ``category``."""
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


def _class_attrs(cls: type) -> set[str]:
    return {attr for klass in cls.__mro__ for attr in vars(klass)}


# -- application events -----------------------------------------------------


@dataclass
class WindowResizeEvent(Event):
    width: int
    height: int

    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    name: ClassVar[str] = "WindowResize"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    name: ClassVar[str] = "WindowClose"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    name: ClassVar[str] = "AppTick"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    name: ClassVar[str] = "AppUpdate"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    name: ClassVar[str] = "AppRender"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


# -- keyboard events --------------------------------------------------------


@dataclass
class KeyEvent(Event):
    """Base of keyboard events."""

    key_code: int

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT


@dataclass
class KeyPressedEvent(KeyEvent):
    repeat_count: int = 0

    event_type: ClassVar[EventType] = EventType.KEY_PRESSED
    name: ClassVar[str] = "KeyPressed"

    def __str__(self) -> str:
        return f"KeyPressedEvent: {self.key_code} ({self.repeat_count} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED
    name: ClassVar[str] = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {self.key_code}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_TYPED
    name: ClassVar[str] = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {self.key_code}"


# -- mouse events -----------------------------------------------------------


@dataclass
class MouseMovedEvent(Event):
    mouse_x: float
    mouse_y: float

    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    name: ClassVar[str] = "MouseMoved"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_fmt_number(self.mouse_x)}, {_fmt_number(self.mouse_y)}"


@dataclass
class MouseScrolledEvent(Event):
    offset_x: float
    offset_y: float

    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    name: ClassVar[str] = "MouseScrolled"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    def __str__(self) -> str:
        return (
            f"MouseScrolledEvent: {_fmt_number(self.offset_x)}, "
            f"{_fmt_number(self.offset_y)}"
        )


@dataclass
class MouseButtonEvent(Event):
    """Base of mouse button events."""

    button: int

    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED
    name: ClassVar[str] = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {self.button}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED
    name: ClassVar[str] = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {self.button}"


# -- dispatch ---------------------------------------------------------------

E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Route one event to a handler when the event is of a given type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> bool:
        """Call ``func`` if the event has ``event_class``'s type; store its result as ``handled``.

        Returns True when the handler was called.
        """
        if "event_type" not in _class_attrs(event_class):
            raise TypeError(f"{event_class.__name__} has no event type to dispatch on")
        if self.event.event_type != event_class.event_type:
            return False
        self.event.handled = bool(func(self.event))  # type: ignore[arg-type]
        return True
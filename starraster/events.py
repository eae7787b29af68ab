"""Input events and simple keyboard and mouse state trackers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class EventType(Enum):
    """Kinds of input event."""

    QUIT = auto()
    KEYDOWN = auto()
    KEYUP = auto()
    MOUSEMOTION = auto()
    MOUSEBUTTONUP = auto()
    MOUSEBUTTONDOWN = auto()
    JOYSTICKAXISMOTION = auto()
    JOYSTICKBUTTONDOWN = auto()
    JOYSTICKBUTTONUP = auto()
    JOYSTICKHATMOTION = auto()


# Key symbols
TAB = 9
SPACE = 32
UPARROW = 273
DOWNARROW = 274
RIGHTARROW = 275
LEFTARROW = 276

# Mouse buttons and the bit each sets in a motion event's button state
BUTTON_LEFT = 1
BUTTON_MIDDLE = 2
BUTTON_RIGHT = 3


def button_mask(button: int) -> int:
    """The bit a pressed ``button`` sets in a motion event's ``state``."""
    return 1 << (button - 1)


@dataclass(frozen=True)
class InputEvent:
    """One input event.

    ``key`` is the key symbol of keyboard events, ``x``/``y`` the cursor
    position of mouse events, ``button`` the button of button events and
    ``state`` the bitmask of held buttons of motion events.
    """

    type: EventType
    key: int | None = None
    x: int = 0
    y: int = 0
    button: int = 0
    state: int = 0


class Keyboard:
    """Tracks one held key: while a key is down, other presses are ignored."""

    def __init__(self) -> None:
        self.keydown = False
        self.sym: int | None = None

    def update(self, event: InputEvent) -> None:
        """Apply a key press or release; other events are ignored."""
        if event.type is EventType.KEYDOWN:
            if not self.keydown:
                self.keydown = True
                self.sym = event.key
        elif event.type is EventType.KEYUP:
            if self.keydown and event.key == self.sym:
                self.keydown = False

    def keypressed(self, sym: int) -> bool:
        """Whether ``sym`` is the key currently held."""
        return self.keydown and self.sym == sym


class Mouse:
    """Tracks the cursor position and which buttons are down."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.left = False
        self.middle = False
        self.right = False

    def update(self, event: InputEvent) -> None:
        """Apply a motion or button event; other events are ignored."""
        if event.type is EventType.MOUSEMOTION:
            self.x, self.y = event.x, event.y
            self.left = bool(event.state & button_mask(BUTTON_LEFT))
            self.middle = bool(event.state & button_mask(BUTTON_MIDDLE))
            self.right = bool(event.state & button_mask(BUTTON_RIGHT))
        elif event.type in (EventType.MOUSEBUTTONUP, EventType.MOUSEBUTTONDOWN):
            self.x, self.y = event.x, event.y
            self.left = event.button == BUTTON_LEFT
            self.middle = event.button == BUTTON_MIDDLE
            self.right = event.button == BUTTON_RIGHT
"""Window-system event numbers, as used in an event's ``type`` field."""

from __future__ import annotations

from enum import IntEnum

LAST_EVENT = 36
"""One past the highest event number."""


class EventType(IntEnum):
    """Event kinds; 0 and 1 are reserved for errors and replies."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35

    def is_input(self) -> bool:
        """Whether the event comes from the keyboard or the mouse."""
        return self in _INPUT_EVENTS


_INPUT_EVENTS = frozenset(
    {
        EventType.KEY_PRESS,
        EventType.KEY_RELEASE,
        EventType.BUTTON_PRESS,
        EventType.BUTTON_RELEASE,
        EventType.MOTION_NOTIFY,
    }
)
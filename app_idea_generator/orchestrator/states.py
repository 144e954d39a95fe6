"""View state definitions and transitions."""

from enum import Enum


class ViewState(Enum):
    """What the user is looking at."""

    NO_PROJECT = "no_project"
    GENERATING = "generating"
    VIEWING = "viewing"
    GENERATING_ADDITIONAL = "generating_additional"


# Valid state transitions
TRANSITIONS = {
    ViewState.NO_PROJECT: {ViewState.GENERATING, ViewState.VIEWING, ViewState.NO_PROJECT},
    # A failed build guide returns to whatever was shown before
    ViewState.GENERATING: {ViewState.VIEWING, ViewState.NO_PROJECT},
    ViewState.VIEWING: {
        ViewState.VIEWING,
        ViewState.GENERATING,
        ViewState.GENERATING_ADDITIONAL,
        ViewState.NO_PROJECT,
    },
    ViewState.GENERATING_ADDITIONAL: {ViewState.VIEWING},
}

BUSY_STATES = {
    ViewState.GENERATING,
    ViewState.GENERATING_ADDITIONAL,
}


def can_transition(from_state: ViewState, to_state: ViewState) -> bool:
    """Check if a state transition is valid."""
    return to_state in TRANSITIONS.get(from_state, set())


def is_busy_state(state: ViewState) -> bool:
    """Check if a request is in flight."""
    return state in BUSY_STATES

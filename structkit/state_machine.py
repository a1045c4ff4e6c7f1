"""An ATM modelled as a finite state machine."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Optional, Sequence, Union


class State(IntEnum):
    IDLE = 0
    CARD_INSERTED = 1
    PIN_ENTERED = 2
    OPTION_SELECTED = 3
    AMOUNT_ENTERED = 4


class Event(IntEnum):
    CARD_INSERT = 0
    PIN_ENTER = 1
    OPTION_SELECTION = 2
    AMOUNT_ENTER = 3
    AMOUNT_DISPATCH = 4


_TRANSITIONS: dict[tuple[State, Event], State] = {
    (State.IDLE, Event.CARD_INSERT): State.CARD_INSERTED,
    (State.CARD_INSERTED, Event.PIN_ENTER): State.PIN_ENTERED,
    (State.PIN_ENTERED, Event.OPTION_SELECTION): State.OPTION_SELECTED,
    (State.OPTION_SELECTED, Event.AMOUNT_ENTER): State.AMOUNT_ENTERED,
    (State.AMOUNT_ENTERED, Event.AMOUNT_DISPATCH): State.IDLE,
}

_PROMPT = (
    "please enter event\n"
    "0 = Card_Insert_Event\n"
    "1 = Pin_Enter_Event\n"
    "2 = Option_Selection_Event\n"
    "3 = Amount_Enter_Event\n"
    "4 = Amount_Dispatch_Event"
)


class AtmStateMachine:
    """Moves through the ATM states; events that do not fit are ignored."""

    def __init__(self, state: State = State.IDLE) -> None:
        self.state = State(state)

    def handle(self, event: Union[Event, int]) -> State:
        """Apply ``event`` and return the resulting state.

        Raises ValueError for a number that is not an event.
        """
        event = Event(event)
        self.state = _TRANSITIONS.get((self.state, event), self.state)
        return self.state


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read event numbers from standard input, one per line, until end of input."""
    parser = argparse.ArgumentParser(description="Interactive ATM state machine.")
    parser.parse_args(argv)
    machine = AtmStateMachine()
    while True:
        print(f"curState: {int(machine.state)}")
        print(_PROMPT)
        line = sys.stdin.readline()
        if not line:
            return 0
        try:
            machine.handle(int(line.strip()))
        except ValueError:
            continue
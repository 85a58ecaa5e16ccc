"""Scanner states.

Only two states are real machine states. The kind of the run being
consumed is data carried by the emitted token, not a separate state.
"""

from __future__ import annotations

from enum import Enum, auto


class ScannerState(Enum):
    """Scanner lifecycle states.

    - SCANNING: Initial state, re-entered after every run emission
    - DONE: Terminal, reached once the EOF token has been emitted

    """

    SCANNING = auto()
    DONE = auto()

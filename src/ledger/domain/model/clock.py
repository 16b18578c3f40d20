"""Simulated clock.

Time in the ledger only moves when an operator asks it to.  The clock is
owned by the session that drives the commands and is handed to whoever
needs it; there is no process-wide "now".
"""

from __future__ import annotations

from dataclasses import dataclass

from ledger.domain.exceptions import ValidationError


@dataclass
class SimulatedClock:
    """Hours elapsed since the session started at 00:00."""

    elapsed_hours: int = 0

    def advance(self, hours: int) -> None:
        if isinstance(hours, bool) or not isinstance(hours, int) or hours <= 0:
            raise ValidationError(f"Invalid hour: {hours!r}")
        self.elapsed_hours += hours

    @property
    def display(self) -> str:
        return f"{self.elapsed_hours % 24:02d}:00"

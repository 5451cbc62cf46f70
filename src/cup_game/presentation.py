# Area: Presentation
"""
cup_game.presentation — The reveal animation contract
======================================================

The orchestrator never draws anything itself. It hands container
indices to a PresentationDriver and awaits each step in order:

    win:   lift(pick) → reveal_at(pick) → hold → lower(pick) → hide_reveal()
    loss:  lift(pick) → hold → lower(pick) → lift(other) → reveal_at(other)
           → hold → lower(other) → hide_reveal()

No two steps of the same round overlap. Subclass PresentationDriver
to plug in a real rendering engine.
"""

from abc import ABC, abstractmethod
import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger("cup_game.presentation")


class PresentationDriver(ABC):
    """
    Abstract base class for the container reveal sequence.

    Every method is a coroutine that returns when its animation step
    has finished on screen.
    """

    # ──────────────────────────────────────────────────────────────
    # Container movement
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    async def lift(self, index: int) -> None:
        """Raise container `index` so whatever is under it shows."""
        ...

    @abstractmethod
    async def lower(self, index: int) -> None:
        """Put container `index` back down."""
        ...

    # ──────────────────────────────────────────────────────────────
    # Win marker
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    async def reveal_at(self, index: int) -> None:
        """Show the win marker under container `index`."""
        ...

    @abstractmethod
    async def hide_reveal(self) -> None:
        """Hide the win marker."""
        ...

    async def layout(self) -> None:
        """Restore the resting layout after a round. Optional."""
        return None


class ConsolePresentation(PresentationDriver):
    """
    Text rendering of the reveal sequence for terminal play.

    Each step prints the row of containers and waits step_seconds.
    """

    CLOSED = "[ ]"
    LIFTED = "/ \\"
    MARKER = "<*>"

    def __init__(
        self,
        container_count: int = 3,
        step_seconds: float = 0.3,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.container_count = container_count
        self.step_seconds = step_seconds
        self._output = output or print
        self._lifted: set = set()
        self._marker: Optional[int] = None

    def render(self) -> str:
        cells = []
        for idx in range(self.container_count):
            if idx in self._lifted:
                cells.append(self.MARKER if self._marker == idx else self.LIFTED)
            else:
                cells.append(self.CLOSED)
        return "  ".join(cells)

    async def _step(self) -> None:
        self._output(self.render())
        await asyncio.sleep(self.step_seconds)

    async def lift(self, index: int) -> None:
        self._lifted.add(index)
        await self._step()

    async def lower(self, index: int) -> None:
        self._lifted.discard(index)
        await self._step()

    async def reveal_at(self, index: int) -> None:
        self._marker = index
        await self._step()

    async def hide_reveal(self) -> None:
        self._marker = None

    async def layout(self) -> None:
        self._lifted.clear()
        self._marker = None

# Area: Round
"""
cup_game._round.selection — Player selection helpers
=====================================================

SelectionSignal is the one-shot wait for the player's pick.
pick_other_container chooses where the win marker goes on a loss.
"""

import asyncio
import logging
import random
from typing import Optional

logger = logging.getLogger("cup_game.round.selection")

# With N=3 a draw hits the player's pick with probability 1/3, so 32 draws
# all colliding has probability 3**-32. Expected draws: N / (N - 1) < 2.
MAX_REJECTION_DRAWS = 32


class SelectionSignal:
    """
    Resolves exactly once with the selected container index.

    Must be created while an event loop is running. One signal per
    round; the orchestrator drops it when the round ends.
    """

    def __init__(self):
        self._future: asyncio.Future = asyncio.get_running_loop().create_future()

    @property
    def is_set(self) -> bool:
        return self._future.done()

    def offer(self, index: int) -> bool:
        """Record index if no selection has been made yet."""
        if self._future.done():
            return False
        self._future.set_result(index)
        return True

    async def wait(self) -> int:
        return await self._future


def pick_other_container(
    selection: int,
    container_count: int,
    rng: Optional[random.Random] = None,
    max_draws: int = MAX_REJECTION_DRAWS,
) -> int:
    """
    Choose a container other than selection, uniformly at random.

    Rejection sampling: draw from all containers and redraw while the
    draw equals the selection, at most max_draws times. If every draw
    collides, fall back to a direct uniform pick among the others.

    Raises:
        ValueError: If there is no other container to choose
    """
    if container_count < 2:
        raise ValueError(f"Need at least 2 containers, got {container_count}")
    if not 0 <= selection < container_count:
        raise ValueError(f"Selection {selection} out of range [0, {container_count})")

    rng = rng or random
    for _ in range(max_draws):
        other = rng.randrange(container_count)
        if other != selection:
            return other

    logger.debug("Rejection sampling exhausted after %d draws", max_draws)
    return (selection + 1 + rng.randrange(container_count - 1)) % container_count

"""Auto-search: keep using holy water until a target option shows up.

The controller and manual single uses share one session, so the two draw
sources are mutually exclusive: a manual use is refused while a search runs
and a search cannot start while a manual use is pending.

Cancellation is cooperative. Each run or manual use captures a token; cancel()
and reset() invalidate it, and a draw is only made while the captured token is
still current. A search that was cancelled while suspended at a yield therefore
never draws again, even if a new search has started in the meantime.
"""

import asyncio
import logging
import random
from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, Field, PrivateAttr

from enchant import RolledOption
from session import SimulationSession

logger = logging.getLogger(__name__)

StepCallback = Callable[[RolledOption], None]


class SearchState(str, Enum):
    """Lifecycle of an auto-search"""

    IDLE = "idle"
    RUNNING = "running"
    MATCHED = "matched"  # Stopped on an option starting with the target
    CANCELLED = "cancelled"  # Stopped by cancel(), reset() or the attempt limit


class SearchResult(BaseModel):
    state: SearchState = Field(..., description="State the search ended in")
    target: str = Field("", description="Prefix that was searched for")
    attempts: int = Field(0, description="Draws made by this search")
    option: Optional[RolledOption] = Field(None, description="Last option drawn")

    model_config = {"frozen": True}

    @property
    def matched(self) -> bool:
        return self.state == SearchState.MATCHED


class SearchController(BaseModel):
    """Drives repeated draws on a session until a target prefix matches.

    A search started with run() executes in the awaiting task; start()
    schedules it as a separate task on the running event loop. Either way the
    loop hands control back to the event loop between draws, so cancel() and
    UI updates get a chance to run.
    """

    session: SimulationSession = Field(..., description="Session the draws apply to")
    state: SearchState = Field(SearchState.IDLE, description="Current search state")
    last_result: Optional[SearchResult] = Field(
        None, description="Outcome of the most recent finished search"
    )

    _token: int = PrivateAttr(default=0)
    _stepping: bool = PrivateAttr(default=False)
    _task: Optional[asyncio.Task] = PrivateAttr(default=None)

    @property
    def is_running(self) -> bool:
        return self.state == SearchState.RUNNING

    @property
    def is_stepping(self) -> bool:
        return self._stepping

    @property
    def task(self) -> Optional[asyncio.Task]:
        """Task of the search scheduled by start(), None once it has finished."""
        return self._task

    def can_start(self, target: str) -> bool:
        return bool(target) and not self.is_running and not self._stepping

    def can_step(self) -> bool:
        return not self.is_running and not self._stepping

    def _begin(self, target: str) -> int:
        self._token += 1
        self.state = SearchState.RUNNING
        self.last_result = None
        logger.debug("Auto search started for %r", target)
        return self._token

    async def _search(
        self,
        target: str,
        token: int,
        rng: Optional[random.Random],
        on_step: Optional[StepCallback],
    ) -> SearchResult:
        config = self.session.config
        attempts = 0
        option: Optional[RolledOption] = None
        try:
            while token == self._token:
                option = self.session.advance(rng)
                attempts += 1
                if on_step:
                    on_step(option)
                if token != self._token:
                    break
                if option.name.startswith(target):
                    self.state = SearchState.MATCHED
                    break
                if config.max_attempts and attempts >= config.max_attempts:
                    logger.info(
                        "Auto search for %r gave up after %d attempts",
                        target,
                        attempts,
                    )
                    self.state = SearchState.CANCELLED
                    break
                # Let pending work (cancel, rendering) run before the next draw
                if attempts % config.yield_every == 0:
                    await asyncio.sleep(0)
        finally:
            current = token == self._token
            if current and self.state == SearchState.RUNNING:
                # Interrupted by an exception, e.g. on_step raised or the task was cancelled
                self.state = SearchState.CANCELLED
            state = self.state if current else SearchState.CANCELLED
            result = SearchResult(
                state=state, target=target, attempts=attempts, option=option
            )
            if current:
                self.last_result = result
                self._task = None
            logger.info(
                "Auto search for %r ended %s after %d attempts",
                target,
                state.value,
                attempts,
            )
        return result

    async def run(
        self,
        target: str,
        rng: Optional[random.Random] = None,
        on_step: Optional[StepCallback] = None,
    ) -> SearchResult:
        """Search in the current task until the target matches or cancel().

        Args:
            target: Prefix the rendered option name must start with. A bare
                option name matches any magnitude of it, a full rendered name
                only matches that exact roll.
            rng: Optional random source for the draws.
            on_step: Optional callback invoked with every option drawn.

        Returns:
            The search outcome. If the search could not start (empty target,
            a search already running or a manual use pending) the result is
            in the IDLE state with zero attempts and the session is untouched.
        """
        if not self.can_start(target):
            logger.debug("Auto search for %r rejected", target)
            return SearchResult(state=SearchState.IDLE, target=target)
        token = self._begin(target)
        return await self._search(target, token, rng, on_step)

    def start(
        self,
        target: str,
        rng: Optional[random.Random] = None,
        on_step: Optional[StepCallback] = None,
    ) -> Optional[asyncio.Task]:
        """Schedule a search as a task on the running event loop.

        Must be called from within a running loop. Returns None if the search
        could not start, see run().
        """
        if not self.can_start(target):
            logger.debug("Auto search for %r rejected", target)
            return None
        token = self._begin(target)
        task = asyncio.get_running_loop().create_task(
            self._search(target, token, rng, on_step)
        )
        task.add_done_callback(lambda _: self._on_task_done(token, target))
        self._task = task
        return task

    def _on_task_done(self, token: int, target: str):
        # A task cancelled before its first step never reaches _search's finally
        if token == self._token and self.state == SearchState.RUNNING:
            self.state = SearchState.CANCELLED
            self.last_result = SearchResult(state=SearchState.CANCELLED, target=target)
        if token == self._token:
            self._task = None

    def cancel(self):
        """Stop a running search before its next draw. No-op when not running."""
        if not self.is_running:
            return
        self._token += 1
        self.state = SearchState.CANCELLED
        self._task = None
        logger.debug("Auto search cancelled")

    async def step(self, rng: Optional[random.Random] = None) -> Optional[RolledOption]:
        """Use a single holy water after the configured feedback delay.

        Returns:
            The option drawn, or None if the use was refused (a search is
            running or another use is pending) or reset() happened during the
            delay.
        """
        if not self.can_step():
            return None
        token = self._token
        self._stepping = True
        try:
            await asyncio.sleep(self.session.config.step_delay)
            if token != self._token:
                return None
            return self.session.advance(rng)
        finally:
            self._stepping = False

    def reset(self):
        """Cancel any search, then clear the session's counters and history."""
        self.cancel()
        self._token += 1
        self.state = SearchState.IDLE
        self.last_result = None
        self.session.reset()

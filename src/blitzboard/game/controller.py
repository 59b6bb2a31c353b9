"""MatchController — the central orchestrator of a timed match.

Coordinates: Position (rules), Clock, the bot engine and two scheduled tasks
(the clock tick and the delayed bot move).  Every trigger, whether a click,
a tick or the bot timer, funnels into :meth:`MatchController._commit`, which
swaps in a whole new :class:`MatchState` and re-derives the outcome.

Thread-safety: all methods are meant to be called from the thread that runs
the scheduler's event loop.  Callbacks scheduled for an earlier match carry
that match's epoch and are dropped when it no longer matches.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from blitzboard.core.enums import Color, PieceKind
from blitzboard.core.move import Move, MoveResult
from blitzboard.core.types import Square, is_valid_square
from blitzboard.engine.greedy import GreedyMaterialEngine
from blitzboard.engine.search import IEngine
from blitzboard.game.interfaces import (
    GameMode,
    IScheduler,
    MatchSettings,
    ScheduledTask,
    TimeControl,
)
from blitzboard.game.outcome import Outcome
from blitzboard.game.state import MatchState, Selection
from blitzboard.game.view import MatchView, build_view

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[MatchState], None]
MoveCallback = Callable[[MoveResult, MatchState], None]
GameOverCallback = Callable[[Outcome], None]


@dataclass
class MatchEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class MatchController:
    """Owns the authoritative match state and every transition on it."""

    __slots__ = (
        "_state",
        "_settings",
        "_scheduler",
        "_engine",
        "_time_source",
        "_tick_task",
        "_bot_task",
        "_is_shut_down",
        "events",
    )

    def __init__(
        self,
        scheduler: IScheduler,
        settings: MatchSettings | None = None,
        engine: IEngine | None = None,
        time_source: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings if settings is not None else MatchSettings()
        self._scheduler = scheduler
        self._engine = (
            engine
            if engine is not None
            else GreedyMaterialEngine(self._settings.bot_color)
        )
        self._time_source = time_source
        self._tick_task: ScheduledTask | None = None
        self._bot_task: ScheduledTask | None = None
        self._is_shut_down = False
        self.events = MatchEvents()
        self._state = MatchState.fresh(
            self._settings.default_time_control,
            self._settings.default_mode,
            bot_color=self._settings.bot_color,
        )

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def settings(self) -> MatchSettings:
        return self._settings

    def view(self) -> MatchView:
        """Presentation snapshot of the current state."""
        return build_view(self._state)

    # ── Public operations ────────────────────────────────────────────────

    def reset(self, time_control: TimeControl | None = None) -> None:
        """Start a fresh match, keeping the mode and, if omitted, the budget."""
        self._start_match(time_control or self._state.time_control, self._state.mode)

    def set_mode(self, mode: GameMode) -> None:
        """Switch between two players and playing the bot; always resets."""
        self._start_match(self._state.time_control, mode)

    def select_or_move(
        self, square: Square, promotion: PieceKind = PieceKind.QUEEN
    ) -> bool:
        """Handle a click on *square*. Returns True if a move was applied."""
        state = self._state
        if self._is_shut_down or state.is_ended:
            return False
        if not is_valid_square(square):
            return False
        if state.is_bot_turn or state.bot_thinking:
            return False

        selection = state.selection
        if selection is not None and square in selection.legal_targets:
            return self._apply_move(Move(selection.origin, square, promotion))

        piece = state.position.piece_at(square)
        if piece is not None and piece.color != state.side_to_move:
            return False

        if piece is None or (selection is not None and selection.origin == square):
            if selection is not None:
                self._commit(replace(state, selection=None))
            return False

        targets = state.position.legal_targets(square)
        self._commit(replace(state, selection=Selection(square, targets)))
        return False

    def tick(self, now: float | None = None) -> None:
        """Charge elapsed time to the running side and re-check for a flag."""
        state = self._state
        if self._is_shut_down or state.is_ended or not state.clock.is_running:
            return
        if now is None:
            now = self._time_source()
        self._commit(replace(state, clock=state.clock.tick(now)))

    def shutdown(self) -> None:
        """Tear down: cancel timers; later callbacks are ignored."""
        self._cancel_bot_task()
        self._cancel_tick_task()
        self._is_shut_down = True
        self._state = replace(
            self._state, clock=self._state.clock.stop(), bot_thinking=False
        )

    # ── Internal transitions ─────────────────────────────────────────────

    def _start_match(self, time_control: TimeControl, mode: GameMode) -> None:
        if self._is_shut_down:
            return
        self._cancel_bot_task()
        self._cancel_tick_task()
        fresh = MatchState.fresh(
            time_control,
            mode,
            bot_color=self._settings.bot_color,
            epoch=self._state.epoch + 1,
        )
        _LOGGER.debug(
            "New match #%d: %s, %s", fresh.epoch, time_control.label, mode.name
        )
        self._commit(fresh)

    def _apply_move(self, move: Move) -> bool:
        state = self._state
        now = self._time_source()

        # The mover's time is settled before the move lands; a flag that fell
        # in the meantime ends the match instead.
        settled = replace(state, clock=state.clock.tick(now))
        if settled.is_ended:
            self._commit(settled)
            return False

        applied = state.position.apply_move(
            move.origin, move.destination, move.promotion
        )
        if applied is None:
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        position, result = applied
        mover = state.side_to_move
        captured_by_white = state.captured_by_white
        captured_by_black = state.captured_by_black
        if result.captured is not None:
            if mover == Color.WHITE:
                captured_by_white += (result.captured,)
            else:
                captured_by_black += (result.captured,)

        next_state = replace(
            settled,
            position=position,
            clock=settled.clock.start(position.side_to_move(), now),
            selection=None,
            captured_by_white=captured_by_white,
            captured_by_black=captured_by_black,
            bot_thinking=False,
        )
        _LOGGER.debug("%s played %s", mover, result.move)
        self._commit(next_state, result)
        return True

    def _commit(
        self, new_state: MatchState, result: MoveResult | None = None
    ) -> None:
        """Install *new_state* and bring timers and bot in line with it.

        Listeners only ever see the installed state: a finished match has its
        clock stopped, and a bot turn is already marked as thinking.
        """
        was_ended = self._state.is_ended and self._state.epoch == new_state.epoch
        outcome = new_state.outcome
        if outcome.is_over:
            self._cancel_bot_task()
            new_state = replace(
                new_state,
                clock=new_state.clock.stop(),
                selection=None,
                bot_thinking=False,
            )
        else:
            new_state = self._begin_bot_turn(new_state)

        self._state = new_state
        self._sync_tick_task()
        if result is not None:
            for cb in self.events.on_move:
                cb(result, new_state)
        for cb in self.events.on_state_changed:
            cb(new_state)

        if outcome.is_over and not was_ended:
            _LOGGER.info(
                "Match #%d over: %s (winner: %s)",
                new_state.epoch,
                outcome.kind.name,
                outcome.winner,
            )
            for cb in self.events.on_game_over:
                cb(outcome)

    # ── Bot turn ─────────────────────────────────────────────────────────

    def _begin_bot_turn(self, state: MatchState) -> MatchState:
        """Choose the bot's reply now and schedule it; returns the thinking state."""
        if not state.is_bot_turn or state.bot_thinking or self._bot_task is not None:
            return state

        result = self._engine.choose_move(state.position)
        if result.best_move is None:
            _LOGGER.debug("Bot found no move in %s", state.position.fen())
            return state

        epoch = state.epoch
        fen = state.position.fen()
        move = result.best_move
        self._bot_task = self._scheduler.call_later(
            self._settings.bot_delay_ms,
            lambda: self._on_bot_timer(epoch, fen, move),
        )
        _LOGGER.debug(
            "Bot chose %s (balance %d), applying in %d ms",
            move,
            result.score,
            self._settings.bot_delay_ms,
        )
        return replace(state, bot_thinking=True, selection=None)

    def _on_bot_timer(self, epoch: int, fen: str, move: Move) -> None:
        state = self._state
        if epoch == state.epoch:
            self._bot_task = None
        if (
            self._is_shut_down
            or epoch != state.epoch
            or state.is_ended
            or not state.bot_thinking
            or state.position.fen() != fen
        ):
            _LOGGER.debug("Discarding stale bot move %s", move)
            return

        if not self._apply_move(move) and self._state.bot_thinking:
            self._commit(replace(self._state, bot_thinking=False))

    def _cancel_bot_task(self) -> None:
        if self._bot_task is not None:
            self._bot_task.cancel()
            self._bot_task = None

    # ── Clock tick ───────────────────────────────────────────────────────

    def _sync_tick_task(self) -> None:
        """Run the tick timer exactly while a side's clock is running."""
        state = self._state
        if not state.clock.is_running or self._is_shut_down:
            self._cancel_tick_task()
            return
        if self._tick_task is not None and self._tick_task.is_active:
            return

        epoch = state.epoch
        self._tick_task = self._scheduler.call_every(
            self._settings.tick_interval_ms,
            lambda: self._on_tick_timer(epoch),
        )

    def _on_tick_timer(self, epoch: int) -> None:
        if epoch != self._state.epoch:
            _LOGGER.debug("Discarding tick from match #%d", epoch)
            return
        self.tick()

    def _cancel_tick_task(self) -> None:
        if self._tick_task is not None:
            self._tick_task.cancel()
            self._tick_task = None

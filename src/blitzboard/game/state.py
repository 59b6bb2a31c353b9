"""MatchState — the single authoritative value describing a match."""

from __future__ import annotations

from dataclasses import dataclass, field

from blitzboard.core.enums import Color, PieceKind
from blitzboard.core.types import Square
from blitzboard.engine.greedy import material_total
from blitzboard.game.clock import Clock
from blitzboard.game.interfaces import GameMode, MatchPhase, TimeControl
from blitzboard.game.outcome import Outcome, resolve_outcome
from blitzboard.rules.position import Position


@dataclass(frozen=True, slots=True)
class Selection:
    """A selected piece and the squares it may move to."""

    origin: Square
    legal_targets: frozenset[Square] = frozenset()


@dataclass(frozen=True, slots=True)
class MatchState:
    """Snapshot of a match.

    Transitions build a new value with :func:`dataclasses.replace`; nothing
    mutates a ``MatchState`` in place.  ``outcome`` and ``phase`` are derived
    on access so they cannot drift from position and clock.
    """

    position: Position
    clock: Clock
    time_control: TimeControl
    mode: GameMode = GameMode.VS_BOT
    bot_color: Color = Color.BLACK
    selection: Selection | None = None
    captured_by_white: tuple[PieceKind, ...] = field(default_factory=tuple)
    captured_by_black: tuple[PieceKind, ...] = field(default_factory=tuple)
    bot_thinking: bool = False
    epoch: int = 0

    @classmethod
    def fresh(
        cls,
        time_control: TimeControl,
        mode: GameMode,
        *,
        bot_color: Color = Color.BLACK,
        epoch: int = 0,
    ) -> MatchState:
        """Start-of-match state: initial position, full clocks, nothing selected."""
        return cls(
            position=Position.initial(),
            clock=Clock.from_time_control(time_control),
            time_control=time_control,
            mode=mode,
            bot_color=bot_color,
            epoch=epoch,
        )

    # ── Derived values ───────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move()

    @property
    def outcome(self) -> Outcome:
        return resolve_outcome(self.position, self.clock)

    @property
    def is_ended(self) -> bool:
        return self.outcome.is_over

    @property
    def is_bot_turn(self) -> bool:
        return self.mode == GameMode.VS_BOT and self.side_to_move == self.bot_color

    @property
    def phase(self) -> MatchPhase:
        if self.is_ended:
            return MatchPhase.ENDED
        if self.bot_thinking:
            return MatchPhase.BOT_THINKING
        if self.selection is not None:
            return MatchPhase.AWAITING_DESTINATION
        return MatchPhase.AWAITING_SELECTION

    def captured_by(self, color: Color) -> tuple[PieceKind, ...]:
        return self.captured_by_white if color == Color.WHITE else self.captured_by_black

    def material_score(self, color: Color) -> int:
        """Total value of the pieces *color* has captured."""
        return material_total(self.captured_by(color))

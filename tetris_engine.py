
"""
Round simulation: gravity, locking, line clears, speed ramp, game over.

All state for one round lives in a RoundState; tick() advances it by one
frame. Within a tick the order is fixed:

  1. input intents (rotate, left, right, down) through the move/rotate gate
  2. fall timer: lock if the piece cannot descend, else drop one row
  3. line-clear timer: one sweep pass, points per cleared row
  4. spawn when there is no active piece (fall interval ramps down)
  5. game-over check

Nothing here touches pygame, so rounds can be driven from tests with
synthetic intents and elapsed times.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional

from tetris_board import Stack, collide, merge, sweep, reached_top
from tetris_piece import Piece, ShapeTemplate, try_move, try_rotate, blocked_below
from tetris_rng import ShapeGenerator

log = logging.getLogger(__name__)


@dataclass
class Intents:
    """Keys pressed this frame. Holding a key does not repeat."""
    rotate: bool = False
    left: bool = False
    right: bool = False
    down: bool = False


@dataclass(frozen=True)
class RoundSettings:
    fall_start_ms: int = 400
    fall_step_ms: int = 2
    fall_min_ms: int = 100
    clear_check_ms: int = 20
    points_per_row: int = 10

    def __post_init__(self):
        if self.fall_min_ms <= 0 or self.clear_check_ms <= 0:
            raise ValueError("timer periods must be positive")
        if self.fall_start_ms < self.fall_min_ms:
            raise ValueError(
                f"fall_start_ms ({self.fall_start_ms}) below fall_min_ms ({self.fall_min_ms})")
        if self.fall_step_ms < 0 or self.points_per_row < 0:
            raise ValueError("fall_step_ms and points_per_row must not be negative")

    @classmethod
    def from_config(cls, config: dict) -> "RoundSettings":
        return cls(
            fall_start_ms=int(config["FALL_START_MS"]),
            fall_step_ms=int(config["FALL_STEP_MS"]),
            fall_min_ms=int(config["FALL_MIN_MS"]),
            clear_check_ms=int(config["CLEAR_CHECK_MS"]),
            points_per_row=int(config["POINTS_PER_ROW"]),
        )


@dataclass
class RoundState:
    settings: RoundSettings
    generator: ShapeGenerator
    stack: Stack = field(default_factory=Stack)
    active: Optional[Piece] = None
    score: int = 0
    lines: int = 0
    pieces: int = 0
    locked: int = 0
    fall_interval_ms: int = 400
    fall_elapsed_ms: float = 0.0
    clear_elapsed_ms: float = 0.0
    game_over: bool = False


def new_round(settings: Optional[RoundSettings] = None, seed: Optional[int] = None) -> RoundState:
    settings = settings or RoundSettings()
    log.info("round start (seed=%s, fall=%dms)", seed, settings.fall_start_ms)
    return RoundState(settings=settings, generator=ShapeGenerator(seed),
                      fall_interval_ms=settings.fall_start_ms)


def spawn(state: RoundState, template: Optional[ShapeTemplate] = None,
          column: Optional[int] = None) -> Piece:
    """Install a fresh active piece and speed up gravity one notch."""
    piece, column = state.generator.generate(template, column)
    s = state.settings
    state.fall_interval_ms = max(s.fall_min_ms, state.fall_interval_ms - s.fall_step_ms)
    state.active = piece
    state.pieces += 1
    state.fall_elapsed_ms = 0.0
    log.debug("spawn #%d %s col=%d interval=%dms", state.pieces, piece.kind, column,
              state.fall_interval_ms)
    return piece


def apply_intents(state: RoundState, intents: Intents):
    if state.active is None:
        return
    steps = []
    if intents.rotate: steps.append(lambda p: try_rotate(state.stack, p))
    if intents.left: steps.append(lambda p: try_move(state.stack, p, -1, 0))
    if intents.right: steps.append(lambda p: try_move(state.stack, p, 1, 0))
    if intents.down: steps.append(lambda p: try_move(state.stack, p, 0, 1))
    for step in steps:
        t = step(state.active)
        if t: state.active = t


def lock(state: RoundState):
    piece = state.active
    if any(b.y < 0 for b in piece.blocks):
        # part of the piece never entered the well: stack overflow
        state.game_over = True
        log.info("game over: %s locked above the well, score=%d lines=%d pieces=%d",
                 piece.kind, state.score, state.lines, state.pieces)
    merge(state.stack, piece)
    state.active = None
    state.locked += 1
    log.debug("locked %s at %s", piece.kind, piece.positions())


def fall_step(state: RoundState):
    # detect-before-move: a blocked piece locks on this tick, not the next
    if state.active is None:
        return
    if blocked_below(state.stack, state.active):
        lock(state)
    else:
        state.active = try_move(state.stack, state.active, 0, 1)


def clear_step(state: RoundState) -> int:
    cleared = sweep(state.stack)
    if cleared:
        state.lines += cleared
        state.score += cleared * state.settings.points_per_row
        log.debug("cleared %d row(s), score=%d", cleared, state.score)
    return cleared


def check_game_over(state: RoundState) -> bool:
    if reached_top(state.stack) or (state.active and collide(state.stack, state.active.blocks)):
        if not state.game_over:
            log.info("game over: score=%d lines=%d pieces=%d", state.score, state.lines, state.pieces)
        state.game_over = True
    return state.game_over


def tick(state: RoundState, intents: Optional[Intents], dt_ms: float) -> RoundState:
    if state.game_over:
        return state
    if intents:
        apply_intents(state, intents)

    state.fall_elapsed_ms += dt_ms
    if state.fall_elapsed_ms >= state.fall_interval_ms:
        state.fall_elapsed_ms = 0.0
        fall_step(state)
        if state.game_over:
            return state

    state.clear_elapsed_ms += dt_ms
    if state.clear_elapsed_ms >= state.settings.clear_check_ms:
        state.clear_elapsed_ms = 0.0
        clear_step(state)

    if state.active is None:
        spawn(state)

    check_game_over(state)
    return state

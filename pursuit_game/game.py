import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional

from graphs.weighted_graph import Vertex

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Enumeration for the phases of a pursuit-evasion game."""
    AWAITING_START = "awaiting_start"
    PURSUER_TURN = "pursuer_turn"
    EVADER_TURN = "evader_turn"
    CAPTURED = "captured"
    BUDGET_EXHAUSTED = "budget_exhausted"


TERMINAL_STATES = (GameState.CAPTURED, GameState.BUDGET_EXHAUSTED)


class Positions(NamedTuple):
    """Where both players stand, as handed to renderers."""
    pursuer: Optional[Vertex]
    evader: Optional[Vertex]


@dataclass
class GameResult:
    """
    Outcome of a finished game.

    Attributes:
        captured: True if both players ended on the same vertex
        rounds: Completed rounds (both players moved once)
        moves: Individual moves made after the starts
        state: Terminal state reached
        history: Positions after the starts and after every move
    """
    captured: bool
    rounds: int
    moves: int
    state: GameState
    history: List[Positions] = field(default_factory=list)


class PursuitEvasionGame:
    def __init__(self, graph, pursuer, evader, max_rounds=None, first_mover="pursuer"):
        """
        Initialize a pursuit-evasion game.

        graph: WeightedGraph both players move on.
        pursuer: Strategy trying to reach the evader.
        evader: Strategy trying to stay away from the pursuer.
        max_rounds: Round ceiling; None plays until capture.
        first_mover: "pursuer" or "evader", who moves first after the starts.
        """
        if first_mover not in ("pursuer", "evader"):
            raise ValueError("Invalid first_mover. Choose 'pursuer' or 'evader'.")
        if max_rounds is not None and max_rounds < 0:
            raise ValueError(f"max_rounds must be non-negative, got {max_rounds}")
        self.graph = graph
        self.pursuer = pursuer
        self.evader = evader
        self.max_rounds = max_rounds
        self.first_mover = first_mover

        self._state = GameState.AWAITING_START
        self._rounds = 0
        self._moves = 0
        self._history = []

    @property
    def state(self):
        return self._state

    @property
    def rounds(self):
        return self._rounds

    @property
    def moves(self):
        return self._moves

    @property
    def history(self):
        return list(self._history)

    @property
    def is_over(self):
        return self._state in TERMINAL_STATES

    @property
    def captured(self):
        return self._state is GameState.CAPTURED

    def snapshot(self):
        """Current positions of both players (read-only)."""
        return Positions(self.pursuer.current_vertex, self.evader.current_vertex)

    def _opening_state(self):
        return GameState.PURSUER_TURN if self.first_mover == "pursuer" else GameState.EVADER_TURN

    def _record(self):
        positions = self.snapshot()
        self._history.append(positions)
        if positions.pursuer is not None and positions.pursuer is positions.evader:
            self._state = GameState.CAPTURED
            logger.info("Evader captured at %r after %d moves", positions.pursuer, self._moves)
            return True
        return False

    def start(self, pursuer_start=None, evader_start=None):
        """
        Place both players.

        The pursuer picks first; the evader has the harder objective, so it
        picks second knowing where the pursuer stands. Explicit starts bypass
        the strategies' choice.
        """
        if self._state is not GameState.AWAITING_START:
            raise RuntimeError("Game has already started.")

        if pursuer_start is not None:
            self.pursuer.place(pursuer_start)
        else:
            self.pursuer.choose_start()

        if evader_start is not None:
            self.evader.place(evader_start)
        else:
            self.evader.choose_start(self.pursuer.current_vertex)

        logger.debug("Starts: pursuer=%r evader=%r", self.pursuer.current_vertex, self.evader.current_vertex)
        self._state = self._opening_state()
        if not self._record() and self._budget_spent():
            self._state = GameState.BUDGET_EXHAUSTED
        return self.snapshot()

    def _budget_spent(self):
        return self.max_rounds is not None and self._rounds >= self.max_rounds

    def _check_move(self, name, before, after):
        if after is before:
            return
        if not any(after is neighbor for neighbor in self.graph.adjacent(before)):
            raise ValueError(f"Illegal move by {name}: {after!r} is not adjacent to {before!r}")

    def step(self):
        """
        Play one half-turn and return the resulting state.

        Positions are compared after every single move, so the game can end
        in the middle of a round.
        """
        if self._state is GameState.AWAITING_START:
            self.start()
            return self._state
        if self.is_over:
            raise RuntimeError(f"Game is over ({self._state.value}).")

        if self._state is GameState.PURSUER_TURN:
            name, mover, opponent = "pursuer", self.pursuer, self.evader
            next_state = GameState.EVADER_TURN
        else:
            name, mover, opponent = "evader", self.evader, self.pursuer
            next_state = GameState.PURSUER_TURN

        before = mover.current_vertex
        after = mover.choose_next(opponent.current_vertex)
        self._check_move(name, before, after)
        self._moves += 1
        logger.debug("Move %d: %s %r -> %r", self._moves, name, before, after)

        if self._record():
            return self._state

        # A round is complete once the second mover has moved
        if next_state is self._opening_state():
            self._rounds += 1
            if self._budget_spent():
                self._state = GameState.BUDGET_EXHAUSTED
                logger.info("Round budget of %d exhausted without capture", self.max_rounds)
                return self._state
        self._state = next_state
        return self._state

    def run(self):
        """Play until capture or until the round budget runs out."""
        if self._state is GameState.AWAITING_START:
            self.start()
        while not self.is_over:
            self.step()
        return self.result()

    def result(self):
        return GameResult(
            captured=self.captured,
            rounds=self._rounds,
            moves=self._moves,
            state=self._state,
            history=self.history,
        )

from typing import Optional, Protocol, runtime_checkable

import numpy as np

from graphs.weighted_graph import Vertex, WeightedGraph
from structures.hash_map import HashMap


@runtime_checkable
class Strategy(Protocol):
    """What the game loop needs from a pursuer or an evader."""

    @property
    def current_vertex(self) -> Optional[Vertex]: ...

    def place(self, vertex: Vertex) -> None: ...

    def choose_start(self, other: Optional[Vertex] = None) -> Vertex: ...

    def choose_next(self, other_current: Vertex) -> Vertex: ...


class Player:
    """
    Position record held by every strategy.

    Holds the board, the random source used for tie-breaks and the vertex the
    player occupies. Only the owning strategy and the game (through the
    strategy's place) change that vertex.
    """

    def __init__(self, graph: WeightedGraph, rng: Optional[np.random.Generator] = None):
        self.graph = graph
        self.rng = rng if rng is not None else np.random.default_rng()
        self.current = None
        self.path = []  # Track the vertices visited

    def place(self, vertex):
        if vertex not in self.graph:
            raise ValueError(f"{vertex!r} is not a vertex of the board.")
        self.current = vertex
        self.path = [vertex]
        return vertex

    def move(self, vertex):
        self.current = vertex
        self.path.append(vertex)
        return vertex

    def require_position(self):
        if self.current is None:
            raise RuntimeError("choose_start() must be called before choose_next().")
        return self.current

    def pick(self, candidates):
        """Uniformly random member of a non-empty list."""
        return candidates[int(self.rng.integers(len(candidates)))]

    def random_vertex(self):
        vertices = self.graph.vertices
        if not vertices:
            raise ValueError("Cannot choose a start on an empty graph.")
        return self.pick(vertices)

    def __repr__(self):
        return f"Player(at={self.current!r})"


def best_candidates(candidates, score, maximize=False):
    """
    Candidates sharing the best score.

    Returns:
    - (list of tied candidates, best score); ([], None) for no candidates.
    """
    best, best_score = [], None
    for candidate in candidates:
        value = score(candidate)
        if best_score is None or (value > best_score if maximize else value < best_score):
            best, best_score = [candidate], value
        elif value == best_score:
            best.append(candidate)
    return best, best_score


def farthest_start(player, other):
    """Random start, or a random vertex farthest from `other` when it is known."""
    if other is None:
        return player.place(player.random_vertex())
    distances = player.graph.distances_from(other)
    farthest, _ = best_candidates(player.graph.vertices, distances.get, maximize=True)
    return player.place(player.pick(farthest))


class RandomStrategy:
    """Random start, random neighbour every turn."""

    def __init__(self, graph, rng=None):
        self.graph = graph
        self.player = Player(graph, rng)

    @property
    def current_vertex(self):
        return self.player.current

    @property
    def path(self):
        return self.player.path

    def place(self, vertex):
        self.player.place(vertex)

    def choose_start(self, other=None):
        return self.player.place(self.player.random_vertex())

    def choose_next(self, other_current):
        current = self.player.require_position()
        neighbors = self.graph.adjacent(current)
        if not neighbors:
            return self.player.move(current)
        return self.player.move(self.player.pick(neighbors))


class MoveTowardStrategy:
    """
    Pursuer that steps to the neighbour closest to the opponent.

    Playing second, it starts on the opponent's vertex. It stays put when no
    neighbour is strictly closer than where it already is.
    """

    def __init__(self, graph, rng=None):
        self.graph = graph
        self.player = Player(graph, rng)

    @property
    def current_vertex(self):
        return self.player.current

    @property
    def path(self):
        return self.player.path

    def place(self, vertex):
        self.player.place(vertex)

    def choose_start(self, other=None):
        return self.player.place(other if other is not None else self.player.random_vertex())

    def choose_next(self, other_current):
        current = self.player.require_position()
        distances = self.graph.distances_from(other_current)
        closest, closest_distance = best_candidates(self.graph.adjacent(current), distances.get)
        if not closest or not closest_distance < distances.get(current):
            return self.player.move(current)
        return self.player.move(self.player.pick(closest))


class MoveAwayStrategy:
    """
    Evader that steps to the neighbour farthest from the opponent.

    Playing second, it starts on the vertex farthest from the opponent's start.
    It always moves, even next to the opponent; only a vertex without
    neighbours keeps it in place.
    """

    def __init__(self, graph, rng=None):
        self.graph = graph
        self.player = Player(graph, rng)

    @property
    def current_vertex(self):
        return self.player.current

    @property
    def path(self):
        return self.player.path

    def place(self, vertex):
        self.player.place(vertex)

    def choose_start(self, other=None):
        return farthest_start(self.player, other)

    def choose_next(self, other_current):
        current = self.player.require_position()
        distances = self.graph.distances_from(other_current)
        farthest, _ = best_candidates(self.graph.adjacent(current), distances.get, maximize=True)
        if not farthest:
            return self.player.move(current)
        return self.player.move(self.player.pick(farthest))


class WeightedMoveAwayStrategy:
    """
    Evader that scores every neighbour instead of only maximising distance.

    score = 0.5 * distance to the opponent
          + 0.3 * degree of the candidate (room to manoeuvre)
          + 0.2 * mean distance to the candidate from each vertex the opponent
                  can reach next (one move of lookahead)
    """

    DISTANCE_WEIGHT = 0.5
    MOBILITY_WEIGHT = 0.3
    FORESIGHT_WEIGHT = 0.2

    def __init__(self, graph, rng=None):
        self.graph = graph
        self.player = Player(graph, rng)

    @property
    def current_vertex(self):
        return self.player.current

    @property
    def path(self):
        return self.player.path

    def place(self, vertex):
        self.player.place(vertex)

    def choose_start(self, other=None):
        return farthest_start(self.player, other)

    def choose_next(self, other_current):
        current = self.player.require_position()
        neighbors = self.graph.adjacent(current)
        if not neighbors:
            return self.player.move(current)

        distances = self.graph.distances_from(other_current)
        # The opponent can only stay when it has no neighbours
        replies = self.graph.adjacent(other_current) or [other_current]
        reply_distances = [self.graph.distances_from(reply) for reply in replies]

        def score(candidate):
            foresight = sum(d.get(candidate) for d in reply_distances) / len(reply_distances)
            return (self.DISTANCE_WEIGHT * distances.get(candidate)
                    + self.MOBILITY_WEIGHT * self.graph.degree(candidate)
                    + self.FORESIGHT_WEIGHT * foresight)

        best, _ = best_candidates(neighbors, score, maximize=True)
        return self.player.move(self.player.pick(best))


class HubPursuitStrategy:
    """
    Pursuer that opens on the best-connected vertex.

    Playing first it starts on a maximum-degree vertex; playing second it
    starts on the opponent. Every turn it steps to the neighbour nearest the
    opponent, even if that is no closer than staying, and counts its visits
    in visit_counts (reported by experiments/play_game.py).
    """

    def __init__(self, graph, rng=None):
        self.graph = graph
        self.player = Player(graph, rng)
        self.visit_counts = HashMap()

    @property
    def current_vertex(self):
        return self.player.current

    @property
    def path(self):
        return self.player.path

    def place(self, vertex):
        self.player.place(vertex)

    def choose_start(self, other=None):
        if other is not None:
            return self.player.place(other)
        if len(self.graph) == 0:
            raise ValueError("Cannot choose a start on an empty graph.")
        hubs, _ = best_candidates(self.graph.vertices, self.graph.degree, maximize=True)
        return self.player.place(self.player.pick(hubs))

    def choose_next(self, other_current):
        current = self.player.require_position()
        neighbors = self.graph.adjacent(current)
        if not neighbors:
            return self.player.move(current)
        distances = self.graph.distances_from(other_current)
        closest, _ = best_candidates(neighbors, distances.get)
        target = self.player.pick(closest)
        self.visit_counts.put(target, self.visit_counts.get(target, 0) + 1)
        return self.player.move(target)

    def most_visited(self):
        """Vertices visited most often and their count; ([], 0) before any move."""
        busiest, count = best_candidates(self.visit_counts.keys(), self.visit_counts.get, maximize=True)
        return busiest, count or 0


STRATEGIES = {
    "random": RandomStrategy,
    "toward": MoveTowardStrategy,
    "away": MoveAwayStrategy,
    "weighted_away": WeightedMoveAwayStrategy,
    "hub_toward": HubPursuitStrategy,
}


def make_strategy(name: str, graph, rng=None):
    """Build a strategy from its registry name."""
    name = name.lower()
    if name not in STRATEGIES:
        raise ValueError(f"Unsupported strategy: {name}. Choose from {sorted(STRATEGIES)}.")
    return STRATEGIES[name](graph, rng)

import argparse
import logging
import sys
import time

from matplotlib import pyplot as plt

sys.path.append('..')
from graphs.graph_generation import GraphGenerator
from pursuit_game.config import GameDefaults
from pursuit_game.game import PursuitEvasionGame
from pursuit_game.player import STRATEGIES, make_strategy
from utils.misc_utils import vertex_index
from utils.random_utils import spawn_rngs
from utils.visualization import board_layout, draw_game_state


def describe(graph, positions):
    pursuer, evader = positions
    return f"pursuer at {vertex_index(graph, pursuer)}, evader at {vertex_index(graph, evader)}"


def describe_visits(graph, pursuer):
    """Most visited vertices of a pursuer that counts visits, or None for other strategies."""
    if not hasattr(pursuer, "most_visited"):
        return None
    busiest, count = pursuer.most_visited()
    if not busiest:
        return "pursuer never moved"
    indices = ", ".join(str(vertex_index(graph, v)) for v in busiest)
    return f"pursuer visited {indices} most often ({count} times)"


def play(graph, pursuer, evader, pursuer_start=None, evader_start=None, first_mover=GameDefaults.FIRST_MOVER,
         max_rounds=GameDefaults.MAX_ROUNDS, delay=GameDefaults.TURN_DELAY, show=False, seed=None):
    """
    Plays one game half-turn by half-turn, pausing `delay` seconds between moves
    and redrawing the board when `show` is set.
    """
    game = PursuitEvasionGame(graph, pursuer, evader, max_rounds=max_rounds, first_mover=first_mover)
    vertices = graph.vertices
    game.start(
        pursuer_start=vertices[pursuer_start] if pursuer_start is not None else None,
        evader_start=vertices[evader_start] if evader_start is not None else None,
    )

    ax, layout = None, None
    if show:
        plt.ion()
        layout = board_layout(graph, seed=seed)
        ax = draw_game_state(graph, game.snapshot(), layout=layout, title="Start")
        plt.pause(delay)

    print(describe(graph, game.snapshot()))
    while not game.is_over:
        if not show:
            time.sleep(delay)
        game.step()
        print(describe(graph, game.snapshot()))
        if show:
            draw_game_state(graph, game.snapshot(), ax=ax, layout=layout, title=f"Move {game.moves}")
            plt.pause(delay)

    if game.captured:
        print(f"Pursuer has caught the evader after {game.rounds} rounds.")
    else:
        print("Evader has escaped.")
    visits = describe_visits(graph, pursuer)
    if visits is not None:
        print(visits)
    return game.result()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play one pursuit-evasion game.")
    parser.add_argument("--graph-file", default=None, help="Graph description file; a random graph when omitted.")
    parser.add_argument("--size", type=int, default=GameDefaults.GRAPH_SIZE)
    parser.add_argument("--probability", type=float, default=GameDefaults.EDGE_PROBABILITY)
    parser.add_argument("--pursuer", choices=sorted(STRATEGIES), default=GameDefaults.PURSUER_STRATEGY)
    parser.add_argument("--evader", choices=sorted(STRATEGIES), default=GameDefaults.EVADER_STRATEGY)
    parser.add_argument("--pursuer-start", type=int, default=None)
    parser.add_argument("--evader-start", type=int, default=None)
    parser.add_argument("--first-mover", choices=["pursuer", "evader"], default=GameDefaults.FIRST_MOVER)
    parser.add_argument("--max-rounds", type=int, default=GameDefaults.MAX_ROUNDS)
    parser.add_argument("--delay", type=float, default=GameDefaults.TURN_DELAY)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--show", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    graph_rng, pursuer_rng, evader_rng = spawn_rngs(args.seed, 3)
    generator = GraphGenerator(rng=graph_rng)
    if args.graph_file:
        graph = generator.load_graph(args.graph_file)
    else:
        graph = generator.random_graph(args.size, args.probability)
    if graph.size() == 0:
        sys.exit("Board is empty, nothing to play.")

    play(graph,
         make_strategy(args.pursuer, graph, pursuer_rng),
         make_strategy(args.evader, graph, evader_rng),
         pursuer_start=args.pursuer_start,
         evader_start=args.evader_start,
         first_mover=args.first_mover,
         max_rounds=args.max_rounds,
         delay=args.delay,
         show=args.show,
         seed=args.seed)
    if args.show:
        plt.ioff()
        plt.show()

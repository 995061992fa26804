import argparse
import sys
import time

import numpy as np
import pandas as pd
from matplotlib import pyplot as plt

sys.path.append('..')
from graphs.graph_generation import GraphGenerator
from pursuit_game.config import ExperimentDefaults, GameDefaults
from pursuit_game.game import PursuitEvasionGame
from pursuit_game.player import make_strategy
from utils.misc_utils import summarize_results
from utils.random_utils import spawn_rngs


def run_game(n, p, pursuer="toward", evader="away", seed=None, max_rounds=GameDefaults.MAX_ROUNDS):
    """
    Plays one game on a fresh random board.

    Parameters:
    - n: Number of vertices.
    - p: Edge probability.
    - pursuer, evader: Strategy registry names.
    - seed: Root seed for the board and both players.
    - max_rounds: Round ceiling.

    Returns:
    - GameResult of the finished game.
    """
    graph_rng, pursuer_rng, evader_rng = spawn_rngs(seed, 3)
    graph = GraphGenerator(rng=graph_rng).random_graph(n, p)
    game = PursuitEvasionGame(
        graph,
        make_strategy(pursuer, graph, pursuer_rng),
        make_strategy(evader, graph, evader_rng),
        max_rounds=max_rounds,
    )
    return game.run()


def run_sweep(sizes=ExperimentDefaults.SIZES,
              probabilities=ExperimentDefaults.PROBABILITIES,
              runs_per_config=ExperimentDefaults.RUNS_PER_CONFIG,
              pursuer="toward",
              evader="away",
              seed=ExperimentDefaults.SEED,
              max_rounds=GameDefaults.MAX_ROUNDS,
              verbose=False):
    """
    Capture rate and game length for every (size, probability) pair.

    Each run gets its own seed derived from `seed`, so the sweep is
    reproducible and individual games can be replayed with run_game.

    Returns:
    - DataFrame with one row per configuration.
    """
    run_seeds = np.random.SeedSequence(seed).generate_state(len(sizes) * len(probabilities) * runs_per_config)
    rows = []
    k = 0
    for size in sizes:
        for probability in probabilities:
            start = time.time()
            results = []
            for _ in range(runs_per_config):
                results.append(run_game(size, probability, pursuer, evader, int(run_seeds[k]), max_rounds))
                k += 1
            capture_rate, mean_rounds, std_rounds = summarize_results(results)
            rows.append({
                "size": size,
                "probability": probability,
                "capture_rate": capture_rate,
                "mean_rounds": mean_rounds,
                "std_rounds": std_rounds,
                "runtime": time.time() - start,
            })
            if verbose:
                print(f"Size: {size}, Probability: {probability}")
                print(f"Capture Rate: {capture_rate:.1f}%, Average Rounds: {mean_rounds:.2f}")
    return pd.DataFrame(rows)


def plot_capture_rates(df, title="Capture Rate by Graph Density"):
    fig, ax = plt.subplots(figsize=(8, 5))
    for size, group in df.groupby("size"):
        ax.plot(group["probability"], group["capture_rate"], marker="o", label=f"n={size}")
    ax.set_xlabel("Edge probability")
    ax.set_ylabel("Capture rate (%)")
    ax.set_ylim(0, 105)
    ax.grid(True, linestyle='--', alpha=0.7)
    ax.set_title(title)
    ax.legend(loc="lower right")
    return ax


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Capture rate of a pursuer against an evader on random graphs.")
    parser.add_argument("--sizes", type=int, nargs="+", default=ExperimentDefaults.SIZES)
    parser.add_argument("--probabilities", type=float, nargs="+", default=ExperimentDefaults.PROBABILITIES)
    parser.add_argument("--runs", type=int, default=ExperimentDefaults.RUNS_PER_CONFIG)
    parser.add_argument("--pursuer", default="toward")
    parser.add_argument("--evader", default="away")
    parser.add_argument("--seed", type=int, default=ExperimentDefaults.SEED)
    parser.add_argument("--max-rounds", type=int, default=GameDefaults.MAX_ROUNDS)
    parser.add_argument("--plot", action="store_true")
    args = parser.parse_args()

    df = run_sweep(args.sizes, args.probabilities, args.runs, args.pursuer, args.evader,
                   args.seed, args.max_rounds, verbose=True)
    print(df.to_string(index=False))
    if args.plot:
        plot_capture_rates(df)
        plt.show()

# ===== GAME DEFAULTS =====
class GameDefaults:
    """Default settings for a single pursuit-evasion game."""

    # Round ceiling for bounded games (None means play until capture)
    MAX_ROUNDS = 1000

    # Pause between half-turns when a game is animated, in seconds
    TURN_DELAY = 0.5

    # Random board
    GRAPH_SIZE = 20
    EDGE_PROBABILITY = 0.3

    # Who moves first once both players have chosen a start
    FIRST_MOVER = "pursuer"

    PURSUER_STRATEGY = "hub_toward"
    EVADER_STRATEGY = "away"


# ===== EXPERIMENTS =====
class ExperimentDefaults:
    """Batch simulation settings."""

    SIZES = [10, 15, 20]
    PROBABILITIES = [0.2, 0.3, 0.5]
    RUNS_PER_CONFIG = 100
    SEED = 1

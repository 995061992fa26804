import numpy as np


def make_rng(seed=None):
    """
    Returns a numpy Generator; the same seed always gives the same stream.
    Passing an existing Generator returns it unchanged.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def spawn_rngs(seed, count):
    """
    Derives independent, reproducible generators from one seed.

    Used to give the board generator, the pursuer and the evader their own
    random streams so that changing one player's strategy does not shift the
    other's tie-breaks.

    Args:
        seed (int or None): Root seed.
        count (int): Number of generators to create.

    Returns:
        list of np.random.Generator
    """
    children = np.random.SeedSequence(seed).spawn(count)
    return [np.random.default_rng(child) for child in children]

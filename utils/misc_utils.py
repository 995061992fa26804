import numpy as np


def vertex_index(graph, vertex):
    """Position of vertex in graph.vertices, or None if it is not on the board."""
    for i, v in enumerate(graph.vertices):
        if v is vertex:
            return i
    return None


def check_distance_bounds(graph, distances, tol=1e-9):
    """
    Verifies the triangle bound |d(u) - d(v)| <= w for every edge of graph.

    Parameters:
        graph: WeightedGraph the distances were computed on.
        distances: HashMap of vertex -> distance from one source.
        tol: Absolute tolerance for floating point sums.

    Returns:
        list of edges violating the bound (empty when the distances are consistent).
    """
    violations = []
    for edge in graph.edges:
        du = distances.get(edge.u)
        dv = distances.get(edge.v)
        if np.isinf(du) and np.isinf(dv):
            continue
        if abs(du - dv) > edge.weight + tol:
            violations.append(edge)
    return violations


def summarize_results(results):
    """
    Capture rate and mean rounds over a list of GameResult objects.

    Returns:
        (capture_rate in percent, mean rounds, standard deviation of rounds)
    """
    if not results:
        return 0.0, 0.0, 0.0
    rounds = np.array([r.rounds for r in results], dtype=float)
    captured = np.array([r.captured for r in results], dtype=float)
    return 100.0 * captured.mean(), rounds.mean(), rounds.std()

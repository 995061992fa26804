import logging

import networkx as nx
import numpy as np

from graphs.weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphGenerator:
    def __init__(self, rng=None):
        """
        rng: numpy Generator used by random_graph. A fresh unseeded one when None.
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def random_graph(self, n, p):
        """
        Create a random board with unit-weight edges.

        Parameters:
        - n: Number of vertices.
        - p: Probability that any unordered pair of vertices is connected.

        Returns:
        - G: The generated WeightedGraph, vertices labelled 0..n-1.
        """
        if n < 0:
            raise ValueError(f"Number of vertices must be non-negative, got {n}")
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Edge probability must be in [0, 1], got {p}")

        G = WeightedGraph()
        vertices = [G.add_vertex(i) for i in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                if self.rng.random() < p:
                    G.add_edge(vertices[i], vertices[j], 1.0)
        return G

    def load_graph(self, filename):
        """
        Create a board from a description file.

        The first line gives the vertex count (after a ':' if there is one),
        the second line is a column header and is skipped, and every other
        line is a 'start,end' pair of 0-based vertex indices joined by a
        unit-weight edge.

        A missing or unreadable file is logged and yields an empty graph; bad
        edge lines are logged and skipped.
        """
        G = WeightedGraph()
        try:
            with open(filename, "r") as f:
                lines = f.readlines()
        except OSError as exc:
            logger.error("Unable to read graph file %s: %s", filename, exc)
            return G

        if not lines:
            logger.warning("Graph file %s is empty", filename)
            return G

        try:
            num_vertices = int(lines[0].rsplit(":", 1)[-1].strip())
        except ValueError:
            logger.error("Graph file %s: bad vertex count line %r", filename, lines[0].strip())
            return G
        if num_vertices < 0:
            logger.error("Graph file %s: negative vertex count %d", filename, num_vertices)
            return G

        vertices = [G.add_vertex(i) for i in range(num_vertices)]

        for line_number, line in enumerate(lines[2:], start=3):
            line = line.strip()
            if not line:
                continue
            parts = line.split(",")
            try:
                start, end = int(parts[0]), int(parts[1])
            except (ValueError, IndexError):
                logger.warning("Graph file %s line %d: cannot parse edge %r", filename, line_number, line)
                continue
            if not (0 <= start < num_vertices and 0 <= end < num_vertices):
                logger.warning("Graph file %s line %d: vertex index out of range in %r", filename, line_number, line)
                continue
            G.add_edge(vertices[start], vertices[end], 1.0)

        logger.debug("Loaded %s: %d vertices, %d edges", filename, G.size(), G.num_edges())
        return G


def from_networkx(nx_graph, weight="weight", default_weight=1.0):
    """
    Copy a networkx graph into a WeightedGraph.

    Vertices are created in nx_graph.nodes order and labelled with the
    networkx node, so graph.vertices[i] corresponds to list(nx_graph.nodes)[i].
    Edge weights come from the given edge attribute, default_weight if missing.
    """
    if nx_graph.is_directed():
        raise ValueError("Directed graphs are not supported.")
    G = WeightedGraph()
    lookup = {node: G.add_vertex(node) for node in nx_graph.nodes}
    for u, v, data in nx_graph.edges(data=True):
        G.add_edge(lookup[u], lookup[v], data.get(weight, default_weight))
    return G


def to_networkx(graph, weight="weight"):
    """
    Copy a WeightedGraph into a networkx Graph whose nodes are the Vertex objects.

    Parallel edges collapse to the last one added, as networkx.Graph allows one
    edge per pair.
    """
    G = nx.Graph()
    G.add_nodes_from(graph.vertices)
    for edge in graph.edges:
        G.add_edge(edge.u, edge.v, **{weight: edge.weight})
    return G

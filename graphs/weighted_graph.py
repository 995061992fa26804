import math

from structures.hash_map import HashMap
from structures.indexed_heap import IndexedHeap


class Vertex:
    """
    Identity token for a graph position.

    Two vertices are equal only if they are the same object. The optional label
    is for display and file round-trips and never affects equality.
    """

    __slots__ = ("label",)

    def __init__(self, label=None):
        self.label = label

    def __repr__(self):
        if self.label is None:
            return f"Vertex@{id(self):x}"
        return f"Vertex({self.label!r})"


class Edge:
    """Undirected weighted edge between two vertices."""

    __slots__ = ("u", "v", "weight")

    def __init__(self, u, v, weight):
        self.u = u
        self.v = v
        self.weight = weight

    def vertices(self):
        return self.u, self.v

    def other(self, vertex):
        """The endpoint opposite to vertex."""
        return self.v if vertex is self.u else self.u

    def __repr__(self):
        return f"Edge({self.u!r}, {self.v!r}, {self.weight})"


class WeightedGraph:
    """
    Undirected graph with non-negative edge weights.

    The graph owns its vertices and edges. Each vertex is mapped to the list of
    its incident edges in a HashMap; that index is bookkeeping only and is kept
    in step with the edge list by add_edge/remove_edge/remove_vertex.
    """

    def __init__(self):
        self._vertices = []
        self._edges = []
        self._incident = HashMap()

    @property
    def vertices(self):
        return list(self._vertices)

    @property
    def edges(self):
        return list(self._edges)

    def size(self):
        return len(self._vertices)

    def __len__(self):
        return len(self._vertices)

    def num_edges(self):
        return len(self._edges)

    def __contains__(self, vertex):
        return self._incident.contains_key(vertex)

    def add_vertex(self, label=None):
        vertex = Vertex(label)
        self._vertices.append(vertex)
        self._incident.put(vertex, [])
        return vertex

    def add_edge(self, u, v, weight=1.0):
        """
        Connect u and v with an edge of the given weight.

        Parameters:
        - u, v: Vertices already in this graph (u may equal v).
        - weight: Non-negative distance along the edge.

        Returns:
        - The new Edge.
        """
        if not weight >= 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")
        if u not in self or v not in self:
            raise ValueError("Both endpoints must belong to the graph.")
        edge = Edge(u, v, float(weight))
        self._incident.get(u).append(edge)
        if v is not u:
            self._incident.get(v).append(edge)
        self._edges.append(edge)
        return edge

    def get_edge(self, u, v):
        """First edge joining u and v, or None."""
        for edge in self._incident.get(u, ()):
            if edge.other(u) is v:
                return edge
        return None

    def incident_edges(self, vertex):
        return list(self._incident.get(vertex, ()))

    def adjacent(self, vertex):
        """Distinct neighbours of vertex, in the order their edges were added."""
        neighbors = []
        for edge in self._incident.get(vertex, ()):
            neighbor = edge.other(vertex)
            if not any(neighbor is seen for seen in neighbors):
                neighbors.append(neighbor)
        return neighbors

    def degree(self, vertex):
        return len(self.adjacent(vertex))

    def remove_edge(self, edge):
        if not any(edge is e for e in self._edges):
            return False
        self._edges = [e for e in self._edges if e is not edge]
        for endpoint in edge.vertices():
            incident = self._incident.get(endpoint)
            if incident is not None:
                self._incident.put(endpoint, [e for e in incident if e is not edge])
        return True

    def remove_vertex(self, vertex):
        if vertex not in self:
            return False
        for edge in self._incident.get(vertex):
            self.remove_edge(edge)
        self._incident.remove(vertex)
        self._vertices = [v for v in self._vertices if v is not vertex]
        return True

    def distances_from(self, source):
        """
        Shortest-path distance from source to every vertex (Dijkstra).

        Every vertex starts in an IndexedHeap keyed by its tentative distance.
        The closest vertex is extracted and its edges relaxed; an improved
        neighbour is re-sifted with update_priority. Results are not cached.

        Returns:
        - HashMap of vertex -> distance; unreachable vertices map to math.inf.
        """
        if source not in self:
            raise ValueError(f"{source!r} is not a vertex of this graph.")

        distances = HashMap(capacity=2 * len(self._vertices))
        queue = IndexedHeap(key=distances.get)
        for vertex in self._vertices:
            distances.put(vertex, 0.0 if vertex is source else math.inf)
            queue.offer(vertex)

        while queue.size() > 0:
            current = queue.poll()
            base = distances.get(current)
            if base == math.inf:
                # Everything left in the queue is unreachable
                break
            for edge in self._incident.get(current):
                neighbor = edge.other(current)
                candidate = base + edge.weight
                if candidate < distances.get(neighbor):
                    distances.put(neighbor, candidate)
                    queue.update_priority(neighbor)
        return distances

    def __repr__(self):
        return f"WeightedGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"

from array import array
from collections import deque
from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple


class InvalidVertex(ValueError):
    """Raised when an edge references a vertex that was never added."""


class Edge(NamedTuple):
    # One direction of an undirected connection
    source: int
    dest: int


class MazePath(Sequence[int]):
    """
    Solution path produced by a traversal.

    Vertices are stored in the order a destination-to-source stack yields
    them when popped: path[0] is the traversal source, path[-1] the
    destination.
    """

    __slots__ = ('vertices',)

    def __init__(self, vertices: Sequence[int]):
        if not vertices:
            raise ValueError("A path holds at least one vertex")
        self.vertices: Tuple[int, ...] = tuple(vertices)

    @property
    def source(self) -> int:
        return self.vertices[0]

    @property
    def destination(self) -> int:
        return self.vertices[-1]

    def __getitem__(self, i):
        return self.vertices[i]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __eq__(self, other) -> bool:
        if isinstance(other, MazePath):
            return self.vertices == other.vertices
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.vertices)

    def __repr__(self) -> str:
        return f"MazePath({list(self.vertices)})"


class Graph:
    """
    Undirected adjacency-list graph over integer cell indices.

    Every connection is stored twice, (u, v) under u and (v, u) under v.
    Traversals start at 'source' (the last cell by default) and report the
    path to 'destination' (cell 0 by default).
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.adjacency: Dict[int, List[Edge]] = {}
        # Solve from finish back to start
        self.source = rows * cols - 1
        self.destination = 0

    def add_vertex(self, v: int):
        if not self.has_vertex(v):
            self.adjacency[v] = []

    def has_vertex(self, v: int) -> bool:
        return v in self.adjacency

    def add_edge(self, u: int, v: int):
        if not self.has_vertex(u) or not self.has_vertex(v):
            raise InvalidVertex(f"One of the following vertices doesn't exist: {u}, {v}")

        forward = Edge(u, v)
        backward = Edge(v, u)
        adj_u = self.adjacency[u]
        adj_v = self.adjacency[v]

        if forward not in adj_u and backward not in adj_v:
            adj_u.append(forward)
            adj_v.append(backward)

    def has_edge(self, u: int, v: int) -> bool:
        if self.has_vertex(u) and self.has_vertex(v):
            return Edge(u, v) in self.adjacency[u]
        return False

    def neighbors(self, v: int) -> Iterator[int]:
        """Yields neighbors of v in adjacency (insertion) order."""
        for edge in self.adjacency[v]:
            yield edge.dest

    def vertices(self) -> Iterator[int]:
        return iter(self.adjacency)

    def size(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        # Each undirected edge lives in two adjacency lists
        return sum(len(edges) for edges in self.adjacency.values()) // 2

    def run_bfs(self, source: Optional[int] = None, destination: Optional[int] = None) -> Optional[MazePath]:
        return self._solve(self._bfs, source, destination)

    def run_dfs(self, source: Optional[int] = None, destination: Optional[int] = None) -> Optional[MazePath]:
        return self._solve(self._dfs, source, destination)

    def _solve(self, search, source, destination) -> Optional[MazePath]:
        if source is None:
            source = self.source
        if destination is None:
            destination = self.destination

        # Buffers are indexed by cell id, so size them to the whole grid
        n = self.rows * self.cols
        # array accepts negative indices, so bounds are checked explicitly
        for v in (source, destination):
            if not 0 <= v < n:
                raise IndexError(f"Vertex {v} out of range [0, {n})")

        # Partial graph: an endpoint that was never added has no path
        if not self.has_vertex(source) or not self.has_vertex(destination):
            return None

        # Fresh buffers per call, nothing survives between traversals
        marked = array('B', [0] * n)
        edge_to = array('i', [-1] * n)

        search(source, marked, edge_to)
        return self._path_to(source, destination, marked, edge_to)

    def _bfs(self, source: int, marked: array, edge_to: array):
        queue = deque([source])
        marked[source] = 1

        while queue:
            vertex = queue.popleft()
            for edge in self.adjacency[vertex]:
                if not marked[edge.dest]:
                    edge_to[edge.dest] = vertex
                    marked[edge.dest] = 1
                    queue.append(edge.dest)

    def _dfs(self, source: int, marked: array, edge_to: array):
        """
        Depth-first search with an explicit stack.

        Each frame is (vertex, position in its adjacency list), so the visit
        order matches the recursive version: descend into the first unvisited
        neighbor, resume the scan after backtracking.
        """
        marked[source] = 1
        stack: List[List[int]] = [[source, 0]]

        while stack:
            frame = stack[-1]
            vertex, pos = frame
            edges = self.adjacency[vertex]

            while pos < len(edges) and marked[edges[pos].dest]:
                pos += 1

            if pos == len(edges):
                stack.pop()  # Backtrack
                continue

            nxt = edges[pos].dest
            frame[1] = pos + 1
            edge_to[nxt] = vertex
            marked[nxt] = 1
            stack.append([nxt, 0])

    def _path_to(self, source: int, destination: int, marked: array, edge_to: array) -> Optional[MazePath]:
        if not marked[destination]:
            return None

        # Walk predecessors destination -> source, then flip to pop order
        stack = []
        x = destination
        while x != source:
            stack.append(x)
            x = edge_to[x]
        stack.append(source)
        stack.reverse()
        return MazePath(stack)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.size()}, edges={self.edge_count()}, source={self.source})"

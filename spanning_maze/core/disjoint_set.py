from array import array


class DisjointSet:
    """
    Union-find over cell indices [0, n).

    find() compresses paths, union() merges by size. Every successful
    union decrements the component count, so count() == 1 means every
    cell is connected.
    """

    __slots__ = ('parent', 'size', '_count')

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {n}")
        # Each cell starts as its own root
        self.parent = array('i', range(n))
        self.size = array('i', [1] * n)
        self._count = n

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, x: int):
        # array accepts negative indices, so bounds are checked explicitly
        if not 0 <= x < len(self.parent):
            raise IndexError(f"Element {x} out of range [0, {len(self.parent)})")

    def find(self, x: int) -> int:
        self._check(x)
        parent = self.parent

        root = x
        while parent[root] != root:
            root = parent[root]

        # Path compression: point every node on the way directly at root
        while parent[x] != root:
            parent[x], x = root, parent[x]

        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merges the components holding a and b.
        Returns False (and changes nothing) if they already share a root.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        # Attach smaller tree under larger
        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]

        self._count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def count(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"DisjointSet(n={len(self.parent)}, count={self._count})"

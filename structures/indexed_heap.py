class IndexedHeap:
    """
    Binary heap over a dense list with an identity -> index map.

    The item with the smallest key(item) sits at the root (the largest when
    reverse=True). Because every item's position is tracked by id(item), an
    item whose key changed externally can be relocated with update_priority in
    O(log n) without searching the list.
    """

    def __init__(self, key=None, reverse=False):
        """
        key: Function returning the priority of an item. Items themselves are compared when None.
        reverse: If True, larger priorities come first (max-heap).
        """
        self._key = key if key is not None else (lambda item: item)
        self._reverse = reverse
        self._heap = []
        self._positions = {}

    def _better(self, a, b):
        """True if item a must sit strictly above item b."""
        if self._reverse:
            return self._key(b) < self._key(a)
        return self._key(a) < self._key(b)

    @staticmethod
    def _parent(idx):
        return (idx - 1) // 2

    def _swap(self, i, j):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[id(heap[i])] = i
        self._positions[id(heap[j])] = j

    def _sift_up(self, idx):
        while idx > 0:
            parent = self._parent(idx)
            if not self._better(self._heap[idx], self._heap[parent]):
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self, idx):
        size = len(self._heap)
        while True:
            left, right = 2 * idx + 1, 2 * idx + 2
            best = idx
            if left < size and self._better(self._heap[left], self._heap[best]):
                best = left
            if right < size and self._better(self._heap[right], self._heap[best]):
                best = right
            if best == idx:
                return
            self._swap(idx, best)
            idx = best

    def size(self):
        return len(self._heap)

    def __len__(self):
        return len(self._heap)

    def is_empty(self):
        return not self._heap

    def __contains__(self, item):
        return id(item) in self._positions

    def peek(self):
        """Best item without removing it, or None when empty."""
        if not self._heap:
            return None
        return self._heap[0]

    def offer(self, item):
        if id(item) in self._positions:
            raise ValueError(f"Item already in heap: {item!r}")
        # Evaluate the key first so a failing key function leaves the heap untouched
        self._key(item)
        self._heap.append(item)
        self._positions[id(item)] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def poll(self):
        """Remove and return the best item, or None when empty."""
        if not self._heap:
            return None
        best = self._heap[0]
        last = self._heap.pop()
        del self._positions[id(best)]
        if self._heap:
            self._heap[0] = last
            self._positions[id(last)] = 0
            self._sift_down(0)
        return best

    def update_priority(self, item):
        """
        Restore the heap invariant after item's priority changed.

        The item is compared against its parent and its children; it moves up
        if it now beats its parent, down if a child now beats it. Both cannot
        hold at once since the rest of the heap was already ordered.
        """
        idx = self._positions.get(id(item))
        if idx is None:
            raise ValueError(f"Item not in heap: {item!r}")

        if idx > 0 and self._better(item, self._heap[self._parent(idx)]):
            self._sift_up(idx)
            return

        size = len(self._heap)
        left, right = 2 * idx + 1, 2 * idx + 2
        if (left < size and self._better(self._heap[left], item)) or \
           (right < size and self._better(self._heap[right], item)):
            self._sift_down(idx)

    def __iter__(self):
        # Array order, not priority order
        return iter(list(self._heap))

    def __repr__(self):
        return self._render(0, 0) or "IndexedHeap([])"

    def _render(self, idx, depth):
        if idx >= len(self._heap):
            return ""
        right = self._render(2 * idx + 2, depth + 1)
        left = self._render(2 * idx + 1, depth + 1)
        return right + "\t" * depth + repr(self._heap[idx]) + "\n" + left

DEFAULT_INITIAL_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75


class _Node:
    __slots__ = ("key", "value", "next")

    def __init__(self, key, value, next=None):
        self.key = key
        self.value = value
        self.next = next

    def __repr__(self):
        return f"{self.key!r}: {self.value!r}"


class HashMap:
    """
    Associative map built on separate chaining.

    Buckets are singly-linked chains of key/value nodes. The table doubles when
    size reaches load_factor * capacity and halves after a removal drops size
    below a quarter of that threshold. Keys are compared by value (==) and may
    not be None.
    """

    def __init__(self, capacity=DEFAULT_INITIAL_CAPACITY, load_factor=DEFAULT_LOAD_FACTOR):
        """
        capacity: Initial number of buckets. Zero is promoted to one.
        load_factor: Positive ratio of entries to buckets that triggers growth.
        """
        if capacity < 0:
            raise ValueError(f"Illegal initial capacity: {capacity}")
        if not load_factor > 0:
            raise ValueError(f"Illegal load factor: {load_factor}")
        self._buckets = [None] * max(1, int(capacity))
        self._load_factor = float(load_factor)
        self._size = 0

    @property
    def capacity(self):
        return len(self._buckets)

    @property
    def load_factor(self):
        return self._load_factor

    def _index(self, key, capacity=None):
        return abs(hash(key)) % (capacity or len(self._buckets))

    def size(self):
        return self._size

    def __len__(self):
        return self._size

    def put(self, key, value):
        """
        Associate value with key, overwriting any previous value.

        Returns:
        - The previous value for key, or None if key was absent.
        """
        if key is None:
            raise ValueError("Illegal key: None")
        index = self._index(key)
        node = self._buckets[index]
        while node is not None:
            # Only a node that still belongs to this bucket under the current capacity can match
            if self._index(node.key) == index and node.key == key:
                old = node.value
                node.value = value
                return old
            node = node.next

        self._buckets[index] = _Node(key, value, self._buckets[index])
        self._size += 1
        if self._size >= self._load_factor * self.capacity:
            self._rehash(self.capacity * 2)
        return None

    def get(self, key, default=None):
        if key is None:
            return default
        node = self._buckets[self._index(key)]
        while node is not None:
            if node.key == key:
                return node.value
            node = node.next
        return default

    def contains_key(self, key):
        if key is None:
            return False
        node = self._buckets[self._index(key)]
        while node is not None:
            if node.key == key:
                return True
            node = node.next
        return False

    def __contains__(self, key):
        return self.contains_key(key)

    def remove(self, key):
        """
        Delete the entry for key.

        Returns:
        - The removed value, or None if key was absent.
        """
        if key is None:
            return None
        index = self._index(key)
        prev = None
        node = self._buckets[index]
        while node is not None:
            if node.key == key:
                if prev is None:
                    self._buckets[index] = node.next
                else:
                    prev.next = node.next
                self._size -= 1
                if self.capacity > 1 and self._size < self.capacity * self._load_factor / 4:
                    self._rehash(max(1, self.capacity // 2))
                return node.value
            prev = node
            node = node.next
        return None

    def _rehash(self, new_capacity):
        old_buckets = self._buckets
        self._buckets = [None] * new_capacity
        for head in old_buckets:
            node = head
            while node is not None:
                index = self._index(node.key, new_capacity)
                self._buckets[index] = _Node(node.key, node.value, self._buckets[index])
                node = node.next

    def clear(self):
        self._buckets = [None] * self.capacity
        self._size = 0

    def _nodes(self):
        for head in self._buckets:
            node = head
            while node is not None:
                yield node
                node = node.next

    def keys(self):
        return [node.key for node in self._nodes()]

    def values(self):
        return [node.value for node in self._nodes()]

    def items(self):
        return [(node.key, node.value) for node in self._nodes()]

    def __iter__(self):
        return iter(self.keys())

    def max_depth(self):
        """Length of the longest chain, a rough measure of collisions."""
        depth = 0
        for head in self._buckets:
            chain = 0
            node = head
            while node is not None:
                chain += 1
                node = node.next
            depth = max(depth, chain)
        return depth

    def __repr__(self):
        lines = []
        for i, head in enumerate(self._buckets):
            entries = []
            node = head
            while node is not None:
                entries.append(repr(node))
                node = node.next
            lines.append(f"bin {i}: " + " | ".join(entries))
        return "\n".join(lines)

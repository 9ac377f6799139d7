from typing import List, Optional, Sequence, Tuple, Hashable

from node import HuffmanNode


class HeapUnderflow(IndexError):
    """Raised when taking an element from an empty heap."""


class HeapOverflow(OverflowError):
    """Raised when inserting into a heap that is already at capacity."""


class MinHeap:
    """Binary min-heap of Huffman nodes ordered by weight.

    The backing list is an implicit binary tree: the parent of index ``i``
    is ``(i - 1) // 2`` and its children are ``2i + 1`` and ``2i + 2``.

    Every entry is stamped with an insertion sequence number and entries are
    ordered by ``(weight, sequence)``, so nodes of equal weight come out in
    the order they went in.

    :ivar _entries: Backing array of ``(weight, sequence, node)`` entries.
    :type _entries: List[Tuple[int, int, HuffmanNode]]
    :ivar _capacity: Maximum number of entries, or ``None`` for unbounded.
    :type _capacity: int | None
    :ivar _sequence: Next sequence number to hand out.
    :type _sequence: int
    """

    def __init__(self, capacity: Optional[int] = None):
        """Create an empty heap.

        :param capacity: Optional upper bound on the number of live entries.
        :type capacity: Optional[int]
        :returns: None
        :rtype: None
        :raises ValueError: If ``capacity`` is negative.
        """
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self._entries: List[Tuple[int, int, HuffmanNode]] = []
        self._capacity = capacity
        self._sequence = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    @classmethod
    def build_from_array(
        cls,
        symbols: Sequence[Hashable],
        frequencies: Sequence[int],
        capacity: Optional[int] = None,
    ) -> "MinHeap":
        """Create a heap holding one leaf per ``(symbol, frequency)`` pair.

        Duplicate symbols are kept as independent leaves. The heap property
        is restored bottom-up from the last internal index, in linear time.

        :param symbols: Symbols, one per leaf.
        :type symbols: Sequence[Hashable]
        :param frequencies: Weight of each symbol, aligned with ``symbols``.
        :type frequencies: Sequence[int]
        :param capacity: Optional capacity; defaults to unbounded.
        :type capacity: Optional[int]
        :returns: A heap containing every leaf.
        :rtype: MinHeap
        :raises ValueError: If the sequences differ in length.
        :raises HeapOverflow: If there are more entries than ``capacity``.
        """
        if len(symbols) != len(frequencies):
            raise ValueError(
                f"Got {len(symbols)} symbols but {len(frequencies)} frequencies"
            )
        heap = cls(capacity)
        if capacity is not None and len(symbols) > capacity:
            raise HeapOverflow(
                f"{len(symbols)} entries do not fit a heap of capacity {capacity}"
            )
        heap._entries = [
            (freq, seq, HuffmanNode(symbol=sym, weight=freq))
            for seq, (sym, freq) in enumerate(zip(symbols, frequencies))
        ]
        heap._sequence = len(heap._entries)
        for idx in range((len(heap._entries) - 2) // 2, -1, -1):
            heap._sift_down(idx)
        return heap

    def insert(self, node: HuffmanNode):
        """Insert ``node`` and sift it up to its place.

        :param node: Node to insert.
        :type node: HuffmanNode
        :returns: None
        :rtype: None
        :raises HeapOverflow: If the heap is at capacity.
        """
        if self._capacity is not None and len(self._entries) >= self._capacity:
            raise HeapOverflow(f"Heap is full (capacity {self._capacity})")
        self._entries.append((node.weight, self._sequence, node))
        self._sequence += 1
        self._sift_up(len(self._entries) - 1)

    def peek(self) -> HuffmanNode:
        """Return the minimum-weight node without removing it.

        :raises HeapUnderflow: If the heap is empty.
        """
        if not self._entries:
            raise HeapUnderflow("peek from an empty heap")
        return self._entries[0][2]

    def extract_min(self) -> HuffmanNode:
        """Remove and return the minimum-weight node.

        The last entry replaces the root and is then sunk down, swapping
        with the smaller child while that child is strictly less.

        :returns: The node with the smallest ``(weight, sequence)`` key.
        :rtype: HuffmanNode
        :raises HeapUnderflow: If the heap is empty.
        """
        if not self._entries:
            raise HeapUnderflow("extract_min from an empty heap")
        top = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            self._sift_down(0)
        return top[2]

    def is_valid(self) -> bool:
        """Check the heap property for every non-root index.

        :returns: ``True`` if no entry is smaller than its parent.
        :rtype: bool
        """
        entries = self._entries
        return all(
            entries[i][:2] >= entries[(i - 1) // 2][:2]
            for i in range(1, len(entries))
        )

    def _sift_up(self, idx: int):
        entries = self._entries
        while idx > 0:
            parent = (idx - 1) // 2
            if entries[parent][:2] <= entries[idx][:2]:
                break
            entries[parent], entries[idx] = entries[idx], entries[parent]
            idx = parent

    def _sift_down(self, idx: int):
        entries = self._entries
        size = len(entries)
        while True:
            smallest = idx
            left = 2 * idx + 1
            right = 2 * idx + 2
            if left < size and entries[left][:2] < entries[smallest][:2]:
                smallest = left
            if right < size and entries[right][:2] < entries[smallest][:2]:
                smallest = right
            if smallest == idx:
                return
            entries[smallest], entries[idx] = entries[idx], entries[smallest]
            idx = smallest

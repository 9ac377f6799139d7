from typing import Dict, Hashable, List, Optional, Sequence, Tuple

from heap import MinHeap
from node import HuffmanNode

Code = Tuple[int, ...]


class InvalidInput(ValueError):
    """Raised when symbols and frequencies cannot form a Huffman code."""


def _validate(symbols: Sequence[Hashable], frequencies: Sequence[int]):
    """Check that ``symbols``/``frequencies`` describe a usable alphabet.

    :raises InvalidInput: On empty input, a length mismatch, or a frequency
        that is not a non-negative integer.
    """
    if len(symbols) != len(frequencies):
        raise InvalidInput(
            f"Got {len(symbols)} symbols but {len(frequencies)} frequencies"
        )
    if not symbols:
        raise InvalidInput("At least one symbol is required")
    for sym, freq in zip(symbols, frequencies):
        if isinstance(freq, bool) or not isinstance(freq, int):
            raise InvalidInput(f"Frequency of {sym!r} is not an integer: {freq!r}")
        if freq < 0:
            raise InvalidInput(f"Frequency of {sym!r} is negative: {freq}")


def build_huffman_tree(
    symbols: Sequence[Hashable], frequencies: Sequence[int]
) -> HuffmanNode:
    """Build a Huffman tree by repeatedly merging the two lightest nodes.

    The first node taken from the heap becomes the left child and the second
    the right child of the merged node. ``len(symbols) - 1`` merges happen;
    a single symbol yields a tree that is just one leaf.

    :param symbols: Symbols of the alphabet; duplicates get separate leaves.
    :type symbols: Sequence[Hashable]
    :param frequencies: Non-negative weight of each symbol.
    :type frequencies: Sequence[int]
    :returns: Root of the finished tree.
    :rtype: HuffmanNode
    :raises InvalidInput: If the input is empty or malformed.
    """
    _validate(symbols, frequencies)
    heap = MinHeap.build_from_array(symbols, frequencies, capacity=len(symbols))

    while len(heap) > 1:
        left = heap.extract_min()
        right = heap.extract_min()
        heap.insert(
            HuffmanNode(weight=left.weight + right.weight, left=left, right=right)
        )

    return heap.extract_min()


def generate_codes(root: HuffmanNode) -> List[Tuple[Hashable, Code]]:
    """Walk the tree depth-first and report the path to every leaf.

    Left branches contribute ``0`` and right branches ``1``. Leaves are
    reported in pre-order, left subtree first. A root that is itself a leaf
    gets the empty code.

    :param root: Root of a Huffman tree.
    :type root: HuffmanNode
    :returns: ``(symbol, code)`` pairs, codes as tuples of bits.
    :rtype: List[Tuple[Hashable, Tuple[int, ...]]]
    """
    codes: List[Tuple[Hashable, Code]] = []
    stack: List[Tuple[HuffmanNode, Code]] = [(root, ())]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            codes.append((node.symbol, path))
            continue
        stack.append((node.right, path + (1,)))
        stack.append((node.left, path + (0,)))
    return codes


def tree_height(root: Optional[HuffmanNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    height = 0
    stack = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        height = max(height, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return height


def compute_huffman_codes(
    symbols: Sequence[Hashable], frequencies: Sequence[int]
) -> List[Tuple[Hashable, Code]]:
    """Compute a prefix-free code for ``symbols`` weighted by ``frequencies``.

    :param symbols: Symbols of the alphabet.
    :type symbols: Sequence[Hashable]
    :param frequencies: Non-negative weight of each symbol.
    :type frequencies: Sequence[int]
    :returns: ``(symbol, code)`` pairs in tree order.
    :rtype: List[Tuple[Hashable, Tuple[int, ...]]]
    :raises InvalidInput: If the input is empty or malformed.
    """
    return generate_codes(build_huffman_tree(symbols, frequencies))


def format_code(bits: Code, compact: bool = False) -> str:
    """Render a code as ``"1 1 0 0"`` or, with ``compact``, ``"1100"``."""
    sep = "" if compact else " "
    return sep.join(str(b) for b in bits)


class HuffmanCoder:
    """Huffman code for a fixed alphabet, with summary statistics.

    :ivar symbols: Input symbols, in input order.
    :type symbols: List[Hashable]
    :ivar frequencies: Input weights, aligned with ``symbols``.
    :type frequencies: List[int]
    :ivar root: Root of the Huffman tree.
    :type root: HuffmanNode
    :ivar codes: ``(symbol, code)`` pairs in tree order.
    :type codes: List[Tuple[Hashable, Tuple[int, ...]]]
    """

    def __init__(self, symbols: Sequence[Hashable], frequencies: Sequence[int]):
        """Build the tree and codes for ``symbols``.

        :param symbols: Symbols of the alphabet.
        :type symbols: Sequence[Hashable]
        :param frequencies: Non-negative weight of each symbol.
        :type frequencies: Sequence[int]
        :returns: None
        :rtype: None
        :raises InvalidInput: If the input is empty or malformed.
        """
        self.symbols = list(symbols)
        self.frequencies = list(frequencies)
        self.root = build_huffman_tree(self.symbols, self.frequencies)
        self.codes = generate_codes(self.root)

    @property
    def height(self) -> int:
        return tree_height(self.root)

    @property
    def total_weight(self) -> int:
        return self.root.weight

    def code_table(self) -> Dict[Hashable, Code]:
        """Map every symbol to its code.

        :returns: Mapping from symbol to code.
        :rtype: Dict[Hashable, Tuple[int, ...]]
        :raises InvalidInput: If a symbol occurs more than once, since each
            occurrence has its own code.
        """
        table: Dict[Hashable, Code] = {}
        for sym, code in self.codes:
            if sym in table:
                raise InvalidInput(f"Symbol {sym!r} has more than one code")
            table[sym] = code
        return table

    def weighted_length(self) -> int:
        """Sum of ``weight * len(code)`` over all leaves."""
        total = 0
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            if node.is_leaf():
                total += node.weight * depth
                continue
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        return total

    def average_length(self) -> float:
        """Expected code length in bits per symbol; ``0.0`` for zero weight."""
        if self.total_weight == 0:
            return 0.0
        return self.weighted_length() / self.total_weight

class HuffmanNode:
    """Node of a binary Huffman tree.

    A node is a leaf iff both children are ``None``; internal nodes always
    have exactly two children and carry no symbol of their own.

    :ivar symbol: The symbol stored at a leaf; ``None`` for internal nodes.
    :type symbol: Hashable | None
    :ivar weight: Weight of the subtree rooted at this node.
    :type weight: int
    :ivar left: Left child node (the ``0`` branch).
    :type left: HuffmanNode | None
    :ivar right: Right child node (the ``1`` branch).
    :type right: HuffmanNode | None
    """

    __slots__ = ("symbol", "weight", "left", "right")

    def __init__(self, symbol=None, weight=0, left=None, right=None):
        """Create a Huffman node.

        :param symbol: Symbol value for leaf nodes; ``None`` for internal nodes.
        :type symbol: Hashable | None
        :param int weight: Weight associated with this node.
        :param left: Left child node, if any.
        :type left: HuffmanNode|None
        :param right: Right child node, if any.
        :type right: HuffmanNode|None
        :returns: None
        :rtype: None
        """
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Return ``True`` when the node has no children."""
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode(symbol={self.symbol!r}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight})"

import heapq
import random

import pytest

from huffman import (
    HuffmanCoder,
    InvalidInput,
    build_huffman_tree,
    compute_huffman_codes,
    format_code,
    generate_codes,
    tree_height,
)
from node import HuffmanNode


def _optimal_cost(weights):
    """Minimal weighted path length: the sum of all merge weights."""
    heap = list(weights)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def test_classic_table_exact_codes(classic_table):
    codes = compute_huffman_codes(*classic_table)
    assert codes == [
        ("f", (0,)),
        ("c", (1, 0, 0)),
        ("d", (1, 0, 1)),
        ("a", (1, 1, 0, 0)),
        ("b", (1, 1, 0, 1)),
        ("e", (1, 1, 1)),
    ]


def test_classic_table_tree_shape(classic_table):
    root = build_huffman_tree(*classic_table)
    assert root.weight == 100
    assert root.symbol is None
    assert root.left.symbol == "f"
    assert tree_height(root) == 5


def test_classic_table_statistics(classic_table):
    coder = HuffmanCoder(*classic_table)
    assert coder.total_weight == 100
    assert coder.weighted_length() == 224
    assert coder.average_length() == pytest.approx(2.24)
    assert coder.height == 5
    table = coder.code_table()
    assert len(table["f"]) == 1
    assert len(table["a"]) == len(table["b"]) == 4


def test_single_symbol_gets_empty_code():
    root = build_huffman_tree(["z"], [7])
    assert root.is_leaf()
    assert tree_height(root) == 1
    assert compute_huffman_codes(["z"], [7]) == [("z", ())]
    coder = HuffmanCoder(["z"], [7])
    assert coder.weighted_length() == 0
    assert coder.average_length() == 0.0


def test_two_symbols_first_extracted_is_zero_branch():
    assert compute_huffman_codes(["hi", "lo"], [10, 1]) == [
        ("lo", (0,)),
        ("hi", (1,)),
    ]


def test_duplicates_get_their_own_leaves(is_prefix_free_fn):
    codes = compute_huffman_codes(["a", "a", "b"], [1, 1, 2])
    assert len(codes) == 3
    assert sorted(s for s, _ in codes) == ["a", "a", "b"]
    assert is_prefix_free_fn([c for _, c in codes])
    with pytest.raises(InvalidInput):
        _ = HuffmanCoder(["a", "a", "b"], [1, 1, 2]).code_table()


def test_zero_weights_are_allowed(is_prefix_free_fn):
    coder = HuffmanCoder(["x", "y", "z"], [0, 0, 0])
    assert coder.total_weight == 0
    assert coder.average_length() == 0.0
    assert len(coder.codes) == 3
    assert is_prefix_free_fn([c for _, c in coder.codes])


@pytest.mark.parametrize(
    "symbols, frequencies",
    [
        ([], []),
        (["a", "b"], [1]),
        (["a"], [1, 2]),
        (["a", "b"], [1, -2]),
        (["a"], [1.5]),
        (["a"], ["3"]),
        (["a"], [True]),
    ],
)
def test_invalid_input_rejected(symbols, frequencies):
    with pytest.raises(InvalidInput):
        _ = compute_huffman_codes(symbols, frequencies)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        _ = build_huffman_tree([], [])


@pytest.mark.parametrize("seed", range(10))
def test_random_alphabets_are_prefix_free_and_optimal(seed, is_prefix_free_fn):
    rng = random.Random(seed)
    size = rng.randint(1, 40)
    symbols = list(range(size))
    frequencies = [rng.randint(0, 100) for _ in range(size)]

    coder = HuffmanCoder(symbols, frequencies)
    codes = [c for _, c in coder.codes]

    assert len(codes) == size
    assert sorted(s for s, _ in coder.codes) == symbols
    assert is_prefix_free_fn(codes)
    assert coder.weighted_length() == _optimal_cost(frequencies)
    assert coder.height - 1 == max(len(c) for c in codes)


def test_codes_are_deterministic(classic_table):
    first = compute_huffman_codes(*classic_table)
    second = compute_huffman_codes(*classic_table)
    assert first == second


def test_generate_codes_walks_left_before_right():
    a = HuffmanNode(symbol="a", weight=1)
    b = HuffmanNode(symbol="b", weight=1)
    c = HuffmanNode(symbol="c", weight=2)
    root = HuffmanNode(weight=4, left=HuffmanNode(weight=2, left=a, right=b), right=c)
    assert generate_codes(root) == [
        ("a", (0, 0)),
        ("b", (0, 1)),
        ("c", (1,)),
    ]


def test_tree_height_of_nothing_is_zero():
    assert tree_height(None) == 0


def test_format_code():
    assert format_code((1, 1, 0, 0)) == "1 1 0 0"
    assert format_code((1, 1, 0, 0), compact=True) == "1100"
    assert format_code(()) == ""

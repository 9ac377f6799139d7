import argparse
import sys

from typing import List, Optional, Tuple
from huffman import HuffmanCoder, InvalidInput, format_code

#: Classic textbook alphabet used when no pairs are given on the command line
DEFAULT_TABLE = (("a", 5), ("b", 9), ("c", 12), ("d", 13), ("e", 16), ("f", 45))


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Print Huffman codes for symbols with known frequencies"
    )
    parser.add_argument(
        "pair",
        nargs="*",
        help="SYMBOL:FREQ pairs (default: the a:5 b:9 c:12 d:13 e:16 f:45 table)",
    )
    parser.add_argument(
        "-c",
        "--compact",
        action="store_true",
        help="Print codes without spaces between bits",
    )
    parser.add_argument(
        "-s",
        "--stats",
        action="store_true",
        help="Also print total weight, weighted and average code length",
    )
    return parser


def _parse_pair(text: str) -> Tuple[str, int]:
    """Split a ``SYMBOL:FREQ`` argument.

    The last colon separates the frequency, so ``"::3"`` names the symbol
    ``":"``.

    :param text: Command-line argument.
    :type text: str
    :returns: The symbol and its frequency.
    :rtype: Tuple[str, int]
    :raises ValueError: If the argument is not of the form ``SYMBOL:FREQ``.
    """
    symbol, sep, freq = text.rpartition(":")
    if not sep or not symbol:
        raise ValueError(f"Expected SYMBOL:FREQ, got {text!r}")
    try:
        return symbol, int(freq)
    except ValueError:
        raise ValueError(f"Frequency is not an integer in {text!r}") from None


def _parse_pairs(pairs: List[str]) -> Tuple[List[str], List[int]]:
    """Turn CLI pairs into aligned symbol and frequency lists.

    :param pairs: ``SYMBOL:FREQ`` arguments; empty selects ``DEFAULT_TABLE``.
    :type pairs: List[str]
    :returns: Symbols and frequencies.
    :rtype: Tuple[List[str], List[int]]
    :raises ValueError: If any pair is malformed.
    """
    parsed = [_parse_pair(p) for p in pairs] if pairs else list(DEFAULT_TABLE)
    return [s for s, _ in parsed], [f for _, f in parsed]


def print_codes(coder: HuffmanCoder, compact: bool) -> None:
    """Print one ``symbol -> code`` line per leaf, in tree order.

    :param coder: Built Huffman coder.
    :type coder: HuffmanCoder
    :param compact: Whether to omit the spaces between bits.
    :type compact: bool
    :returns: None
    :rtype: None
    """
    for symbol, code in coder.codes:
        print(f"{symbol} -> {format_code(code, compact=compact)}".rstrip())


def print_stats(coder: HuffmanCoder) -> None:
    print("Total weight: ", coder.total_weight)
    print("Weighted length: ", coder.weighted_length())
    print(f"Average code length: {coder.average_length():.2f}")
    print("Tree height: ", coder.height)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv[1:]``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        symbols, frequencies = _parse_pairs(args.pair)
        coder = HuffmanCoder(symbols, frequencies)
    except InvalidInput as e:
        print(f"[!] Cannot build a Huffman code: {e}")
        return 1
    except ValueError as e:
        print(f"[!] {e}")
        return 1

    print_codes(coder, args.compact)
    if args.stats:
        print_stats(coder)
    return 0


if __name__ == "__main__":
    sys.exit(main())

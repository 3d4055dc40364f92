"""Word tokenizing, frequency counting and word-level Huffman encoding."""

__version__ = "0.1.0"
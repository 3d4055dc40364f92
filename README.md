# wordhuff

wordhuff reads a plain-text file and splits it into lowercase word tokens. It counts
how often each word appears, using a binary search tree, and builds a Huffman code whose
symbols are whole words. It then writes the token list, the frequency table, the code
table and the encoded bits.

## Installation

    pip install .

To install with the test requirements and run the tests:

    pip install ".[test]"
    pytest

## Command line

The command takes the name of a text file. The file must be inside a directory called
`input_output`, and that directory must be in the current working directory.

    wordhuff ch01.txt

The command prints a short summary to standard output:

    BST height: ...
    BST unique words: ...
    Total tokens: ...
    Min frequency: ...
    Max frequency: ...

If there are no tokens, every value except the token total is printed as 0.

It also writes these files into `input_output/`. Each name is the input's base name with
a `.txt` extension removed.

| File            | Contents                                                                 |
|-----------------|--------------------------------------------------------------------------|
| `<base>.tokens` | one token per line                                                       |
| `<base>.freq`   | count, right-aligned to 10 columns, a space, then the word; sorted by count (descending), then word |
| `<base>.hdr`    | each word, a space and its Huffman code, one pair per line, in tree preorder |
| `<base>.code`   | the code of every token in order, as `0`/`1` characters, wrapped at 80 columns |

A text with a single distinct word gives that word the code `0`. An empty input still
produces one newline in each output file.

Before any work starts, the command checks that the directory exists, that the input
file is a readable regular file, and that all four output files can be opened for
writing. When a check or a later write fails, it prints a message to standard error and
exits with a non-zero status:

| Status | Cause                                   |
|--------|-----------------------------------------|
| 1      | wrong number of arguments, or the input file does not exist |
| 2      | the directory does not exist            |
| 3      | the input file cannot be opened         |
| 5      | an output file cannot be opened for writing |
| 4      | any other failure                       |

## Tokenization rules

- A token is one or more ASCII letters, folded to lowercase.
- An apostrophe joins two letters (`don't`, `o'clock`); an apostrophe not followed by a
  letter ends the token and is dropped.
- Digits, punctuation, hyphens, whitespace and other separators end a token.
- A non-ASCII byte also ends a token, and is otherwise ignored.

## Library use

    from wordhuff.scanner import iter_tokens
    from wordhuff.bst import WordBinSearchTree
    from wordhuff.huffman import HuffmanTree

    words = list(iter_tokens(b"the cat and the hat"))
    tree = WordBinSearchTree()
    tree.bulk_insert(words)
    counts = tree.inorder()          # [(word, count), ...] in lexical order
    tree.count_of("the")             # 2; raises KeyError for an unknown word

    huff = HuffmanTree.build_from_counts(counts)
    codes = huff.assign_codes()      # [(word, bitstring), ...] in preorder

`HuffmanTree.write_header(out)` and `HuffmanTree.encode(tokens, out, wrap_cols=80)` write
to any text stream. `encode` raises `PipelineError` if a token has no code.

Other modules:

- `wordhuff.scanner.Scanner` reads the `.txt` file that sits beside a given `.tokens`
  path; `tokenize()` returns the tokens and `tokenize_to_file(path)` also writes them.
- `wordhuff.priority_queue` provides `HufNode` and the `PriorityQueue` used to build the
  tree: lowest frequency first, ties broken by the larger key word.
- `wordhuff.files` provides the checks the command runs (`check_directory`,
  `check_readable_file`, `check_writable`, ...), `base_name_without_txt`, `write_lines`,
  and `PipelineError` with its `ErrorKind`, `message` and `exit_code`.
- `wordhuff.cli` provides `run(directory, file_name)` and `main()` behind the command.

## Limitations

wordhuff only encodes. It has no decoder: nothing reads a `.hdr` and `.code` pair back
into text. The `.code` file holds the bits as `0` and `1` characters, not packed bytes,
so it is not smaller than the input.
"""Word dictionary stored as a flat-array trie.

Every node is a record of 27 unsigned ints, and all the records live one
after another in a single array.array. Node i starts at offset 27 * i:

    slot 0      1 if a word ends at this node, else 0
    slot 1..26  index of the child node for a..z, or 0 if there is none

Node 0 is the root (the empty prefix). Nodes are only ever appended, so a
child always has a larger index than its parent and 0 can serve as the
"no child" sentinel.
"""

import array
import gzip
import io
import os
import time
import zlib
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Iterator, Self

LETTER_A = ord("a")
NUM_LETTERS = 26
NODE_WIDTH = NUM_LETTERS + 1
GZIP_MAGIC = b"\x1f\x8b"

EMPTY_NODE = array.array("I", [0] * NODE_WIDTH)


class DictionaryIOError(OSError):
    """The word list could not be read or decompressed."""


def letter_index(c: str) -> int:
    """Map a letter (either case) to its trie slot, 1-26."""
    return ord(c.lower()) - LETTER_A + 1


def index_letter(i: int) -> str:
    """Inverse of letter_index. Always returns an upper case letter."""
    return chr(ord("A") + i - 1)


def is_ascii_lower(word: str) -> bool:
    return all("a" <= c <= "z" for c in word)


@dataclass
class WordSizeConstraint:
    """Inclusive bounds on the length of words accepted into a Dictionary."""

    min: int = 0
    max: int | None = None

    def too_short(self, length: int) -> bool:
        return length < self.min

    def too_long(self, length: int) -> bool:
        return self.max is not None and length > self.max


@dataclass
class LoadStats:
    lines: int = 0
    accepted: int = 0
    too_short: int = 0
    too_long: int = 0
    wrong_case: int = 0
    elapsed_s: float = 0.0


class Dictionary:
    _tree: array.array
    _words: int
    stats: LoadStats

    def __init__(self):
        self._tree = array.array("I", EMPTY_NODE)
        self._words = 0
        self.stats = LoadStats()

    def lookup_child(self, node: int, letter: int) -> int:
        """Child of node for letter (1-26), or 0 if there isn't one."""
        return self._tree[node * NODE_WIDTH + letter]

    def is_word_end(self, node: int) -> bool:
        return self._tree[node * NODE_WIDTH] != 0

    def add_word(self, word: str) -> int:
        """Insert a lower case word and return the node where it ends.

        Adding a word that's already present leaves the trie unchanged.
        """
        if not is_ascii_lower(word):
            raise ValueError(f"Not a lower case word: {word!r}")
        tree = self._tree
        node = 0
        for c in word:
            slot = node * NODE_WIDTH + ord(c) - LETTER_A + 1
            child = tree[slot]
            if child == 0:
                child = len(tree) // NODE_WIDTH
                tree.extend(EMPTY_NODE)
                tree[slot] = child
            node = child
        if not tree[node * NODE_WIDTH]:
            tree[node * NODE_WIDTH] = 1
            self._words += 1
        return node

    def find_word(self, word: str) -> int | None:
        """Node for this prefix, or None if no stored word starts with it."""
        node = 0
        for c in word:
            if not "a" <= c <= "z":
                return None
            node = self.lookup_child(node, letter_index(c))
            if node == 0:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        node = self.find_word(word)
        return node is not None and self.is_word_end(node)

    def words(self) -> Iterator[str]:
        """All the words in the trie, in alphabetical order."""

        def walk(node: int, prefix: str):
            if self.is_word_end(node):
                yield prefix
            for i in range(1, NODE_WIDTH):
                child = self.lookup_child(node, i)
                if child:
                    yield from walk(child, prefix + chr(LETTER_A + i - 1))

        return walk(0, "")

    def word_count(self) -> int:
        return self._words

    def node_count(self) -> int:
        return len(self._tree) // NODE_WIDTH

    def mem_usage(self) -> int:
        """Bytes used by the node array."""
        return len(self._tree) * self._tree.itemsize

    def _load_lines(self, lines: Iterable[str], size: WordSizeConstraint):
        stats = self.stats
        for line in lines:
            word = line.removesuffix("\n").removesuffix("\r")
            stats.lines += 1
            n = len(word)
            if size.too_long(n):
                stats.too_long += 1
                continue
            if size.too_short(n):
                stats.too_short += 1
                continue
            if not is_ascii_lower(word):
                stats.wrong_case += 1
                continue
            stats.accepted += 1
            self.add_word(word)

    def print_stats(self):
        s = self.stats
        print(f"Dictionary read in {s.elapsed_s:.02f} seconds")
        print(
            f"{s.lines:,} total words, ({s.too_short:,} too short, "
            f"{s.too_long:,} too long, {s.wrong_case:,} not all lower case)"
        )
        print(
            f"Dictionary words {self.word_count():,}, "
            f"tree nodes {self.node_count():,} ({self.mem_usage():,} bytes)"
        )

    @staticmethod
    def from_wordlist(
        words: Iterable[str], size: WordSizeConstraint | None = None
    ) -> Self:
        """Words are filtered the same way as lines of a file."""
        d = Dictionary()
        start_s = time.time()
        d._load_lines(words, size or WordSizeConstraint())
        d.stats.elapsed_s = time.time() - start_s
        return d

    @staticmethod
    def from_stream(
        stream: BinaryIO, size: WordSizeConstraint | None = None, verbose=False
    ) -> Self:
        """Read one word per line from a binary stream, which may be gzipped."""
        start_s = time.time()
        try:
            head = read_head(stream, len(GZIP_MAGIC))
            raw: BinaryIO = io.BufferedReader(PrefixedReader(head, stream))
            if head == GZIP_MAGIC:
                if verbose:
                    print("Decompressing word list")
                raw = gzip.GzipFile(fileobj=raw)
            # Closing these wrappers never closes the caller's stream.
            with io.TextIOWrapper(raw, encoding="utf-8", newline="\n") as lines:
                d = Dictionary()
                d._load_lines(lines, size or WordSizeConstraint())
        except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
            raise DictionaryIOError(f"Unable to read word list: {e}") from e
        d.stats.elapsed_s = time.time() - start_s
        if verbose:
            d.print_stats()
        return d

    @staticmethod
    def from_bytes(
        data: bytes, size: WordSizeConstraint | None = None, verbose=False
    ) -> Self:
        if verbose:
            print(f"Loading words from byte array (length {len(data)})")
        return Dictionary.from_stream(io.BytesIO(data), size, verbose)

    @staticmethod
    def from_string(
        text: str, size: WordSizeConstraint | None = None, verbose=False
    ) -> Self:
        if verbose:
            print(f"Loading words from string {text!r}")
        return Dictionary.from_stream(io.BytesIO(text.encode("utf-8")), size, verbose)

    @staticmethod
    def from_file(
        path: str, size: WordSizeConstraint | None = None, verbose=False
    ) -> Self:
        try:
            if verbose:
                print(f"Loading words from file {file_spec(path)}")
            f = open(path, "rb")
        except OSError as e:
            raise DictionaryIOError(f"Unable to open {path}: {e}") from e
        with f:
            return Dictionary.from_stream(f, size, verbose)


def read_head(stream: BinaryIO, n: int) -> bytes:
    """Read n bytes, or fewer at EOF, even from a stream that trickles them in."""
    head = b""
    while len(head) < n:
        chunk = stream.read(n - len(head))
        if not chunk:
            break
        head += chunk
    return head


class PrefixedReader(io.RawIOBase):
    """Serves head, then the rest of stream. close() leaves stream open."""

    def __init__(self, head: bytes, stream: BinaryIO):
        self._head = head
        self._stream = stream

    def readable(self):
        return True

    def readinto(self, b) -> int:
        if self._head:
            n = min(len(b), len(self._head))
            b[:n] = self._head[:n]
            self._head = self._head[n:]
            return n
        data = self._stream.read(len(b))
        n = len(data)
        b[:n] = data
        return n


def file_spec(path: str) -> str:
    """Describe a path, following any symlinks: "words -> /usr/share/words"."""
    if os.path.islink(path):
        target = os.path.join(os.path.dirname(path), os.readlink(path))
        return f"{path} -> {file_spec(target)}"
    return path

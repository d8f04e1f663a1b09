"""Trie for longest-match, table-driven text rewriting.

Lookup tables map source strings (single characters or clusters of up to a
few characters) to replacements. Applying a table must try the longest key
first so that a cluster like "っきゃ" is never split into "っ" + "きゃ".

The trie works on either ``str`` or UTF-8 ``bytes`` keys, whichever type the
table was built with, and enables:
  - longest-prefix lookup in O(k), where k is the longest key length
  - a single left-to-right rewriting pass that never rescans replaced text
"""


class TrieNode:
    """Single node in the trie tree."""
    __slots__ = ("children", "value", "is_terminal")

    def __init__(self):
        self.children = {}  # element -> TrieNode
        self.value = None  # Replacement (or None if non-terminal)
        self.is_terminal = False  # True if this node ends a complete key


class Trie:
    """Trie over a lookup table, applied longest-match-first.

    Usage:
        trie = Trie({"n": "н", "nj": "њ"})

        trie.translate("konj")
        # Returns "koњ"
    """

    __slots__ = ("root",)

    def __init__(self, table):
        """Build trie from a source -> replacement mapping.

        Args:
            table: dict mapping keys to replacements, all ``str`` or all ``bytes``
        """
        self.root = TrieNode()
        for key, value in table.items():
            if key:
                self._insert(key, value)

    def _insert(self, key, value):
        """Insert key into trie."""
        node = self.root
        children = node.children
        for element in key:
            if element not in children:
                children[element] = TrieNode()
            node = children[element]
            children = node.children
        node.is_terminal = True
        node.value = value

    def _longest_at(self, text, start):
        """Length and value of the longest key matching ``text`` at ``start``."""
        children = self.root.children
        longest_match_len = 0
        longest_value = None
        index = start
        length = len(text)
        while index < length:
            node = children.get(text[index])
            if node is None:
                break
            index += 1
            if node.is_terminal:
                longest_match_len = index - start
                longest_value = node.value
            children = node.children
        return longest_match_len, longest_value

    def translate(self, text):
        """Rewrite every key occurrence in text, longest match first.

        Text between matches is copied unchanged. Replacements are never
        rescanned, so a replacement that happens to contain a key is left
        alone.
        """
        if not self.root.children:
            return text
        root_children = self.root.children
        parts = []
        copy_from = 0
        index = 0
        length = len(text)
        while index < length:
            if text[index] not in root_children:
                index += 1
                continue
            match_len, value = self._longest_at(text, index)
            if not match_len:
                index += 1
                continue
            if copy_from < index:
                parts.append(text[copy_from:index])
            parts.append(value)
            index += match_len
            copy_from = index
        if not parts:
            return text
        if copy_from < length:
            parts.append(text[copy_from:])
        return text[:0].join(parts)


def encode_table(table):
    """Return a copy of a ``str`` table with UTF-8 encoded keys and values."""
    return {key.encode("utf-8"): value.encode("utf-8") for key, value in table.items()}


def invert_table(table):
    """Swap keys and values. When values repeat, the last key listed wins."""
    return {value: key for key, value in table.items()}

"""
Ternary Search Tree — a prefix tree with three links per node.

Each node tests one character: ``left`` holds keys whose character at this
depth is smaller, ``right`` keys whose character is larger, and ``mid`` the
continuations of keys that match it.  Compared with an R-way trie this trades
a few extra comparisons per character for three links per node instead of R.

Only ``mid`` transitions consume a key character; ``left``/``right`` retest
the same character against a sibling node.

Deletion clears the stored value but keeps the nodes in place, so the tree
never shrinks.  The tree is not rebalanced; insertion order shapes it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

WILDCARD = "."


@dataclass
class _TernaryNode:
    """Internal node of the ternary search tree."""

    char: str
    is_end: bool = False
    value: Any = None
    left: _TernaryNode | None = None
    mid: _TernaryNode | None = None
    right: _TernaryNode | None = None


class TernarySearchTree:
    """A ternary search tree mapping string keys to arbitrary values.

    >>> t = TernarySearchTree()
    >>> t.put("app", 1)
    >>> t.put("applic", 2)
    >>> t.put("appl", 3)
    >>> t.longest_prefix_of("application")
    'applic'
    >>> list(t.keys_with_prefix("app"))
    ['app', 'appl', 'applic']
    """

    def __init__(self) -> None:
        self._root: _TernaryNode | None = None
        self._size = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def put(self, key: str, value: Any = True) -> None:
        """Insert *key* with *value*, overwriting any previous value."""
        if not key:
            raise ValueError("key must be non-empty")
        if self._root is None:
            self._root = _TernaryNode(key[0])
        node = self._root
        d = 0
        while True:
            ch = key[d]
            if ch < node.char:
                if node.left is None:
                    node.left = _TernaryNode(ch)
                node = node.left
            elif ch > node.char:
                if node.right is None:
                    node.right = _TernaryNode(ch)
                node = node.right
            elif d < len(key) - 1:
                d += 1
                if node.mid is None:
                    node.mid = _TernaryNode(key[d])
                node = node.mid
            else:
                break
        if not node.is_end:
            self._size += 1
        node.is_end = True
        node.value = value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored for *key*, or *default* if absent."""
        node = self._find_node(key)
        if node is not None and node.is_end:
            return node.value
        return default

    def delete(self, key: str) -> bool:
        """Clear the value for *key*. Returns ``True`` if it was stored.

        The key's nodes stay in the tree as routing nodes.
        """
        node = self._find_node(key)
        if node is None or not node.is_end:
            return False
        node.is_end = False
        node.value = None
        self._size -= 1
        return True

    def starts_with(self, prefix: str) -> bool:
        """Return ``True`` if any stored key starts with *prefix*."""
        # Deleted keys leave dead nodes behind, so look for a live key.
        return next(self.keys_with_prefix(prefix), None) is not None

    def keys(self) -> Iterator[str]:
        """Yield every stored key in ascending order."""
        return self.keys_with_prefix("")

    def keys_with_prefix(self, prefix: str) -> Iterator[str]:
        """Yield all keys that begin with *prefix*, lazily."""
        if not prefix:
            yield from self._collect(self._root, "")
            return
        node = self._find_node(prefix)
        if node is None:
            return
        if node.is_end:
            yield prefix
        yield from self._collect(node.mid, prefix)

    def keys_that_match(self, pattern: str) -> Iterator[str]:
        """Yield keys of exactly ``len(pattern)`` characters matching *pattern*.

        ``.`` in the pattern matches any single character.
        """
        if self._root is None or not pattern:
            return
        last = len(pattern) - 1
        # Entries with a None node are pending emissions of ``acc``.
        stack: list[tuple[_TernaryNode | None, str, int]] = [(self._root, "", 0)]
        while stack:
            current, acc, d = stack.pop()
            if current is None:
                yield acc
                continue
            wanted = pattern[d]
            wild = wanted == WILDCARD
            # Pushed right-to-left so the left subtree is popped first.
            if (wild or wanted > current.char) and current.right is not None:
                stack.append((current.right, acc, d))
            if wild or wanted == current.char:
                if d < last and current.mid is not None:
                    stack.append((current.mid, acc + current.char, d + 1))
                elif d == last and current.is_end:
                    stack.append((None, acc + current.char, d))
            if (wild or wanted < current.char) and current.left is not None:
                stack.append((current.left, acc, d))

    def longest_prefix_of(self, s: str) -> str:
        """Return the longest stored key that is a prefix of *s* (``""`` if none)."""
        node = self._root
        length = 0
        d = 0
        while node is not None and d < len(s):
            ch = s[d]
            if ch < node.char:
                node = node.left
            elif ch > node.char:
                node = node.right
            else:
                d += 1
                if node.is_end:
                    length = d
                node = node.mid
        return s[:length]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: str) -> bool:
        node = self._find_node(key)
        return node is not None and node.is_end

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _find_node(self, key: str) -> _TernaryNode | None:
        """Return the node holding the last character of *key*, or None."""
        if not key:
            return None
        node = self._root
        d = 0
        while node is not None:
            ch = key[d]
            if ch < node.char:
                node = node.left
            elif ch > node.char:
                node = node.right
            elif d < len(key) - 1:
                node = node.mid
                d += 1
            else:
                return node
        return None

    @staticmethod
    def _collect(node: _TernaryNode | None, prefix: str) -> Iterator[str]:
        """Yield stored keys under *node* in order, each prefixed by *prefix*.

        Visits left, the node itself, mid, then right; only the node itself
        and its ``mid`` subtree extend the accumulated prefix.
        """
        if node is None:
            return
        stack: list[tuple[_TernaryNode | None, str]] = [(node, prefix)]
        while stack:
            current, acc = stack.pop()
            if current is None:
                yield acc
                continue
            if current.right is not None:
                stack.append((current.right, acc))
            if current.mid is not None:
                stack.append((current.mid, acc + current.char))
            if current.is_end:
                stack.append((None, acc + current.char))
            if current.left is not None:
                stack.append((current.left, acc))

"""
Wide Trie (R-way prefix tree) — one child slot per alphabet character.

Techniques used:
  - Direct indexing: every node owns a fixed list of ``radix`` child links,
    so branching on a character is a single list lookup.
  - Iterative traversal: public methods walk the tree with loops and an
    explicit stack, so the call stack stays constant regardless of key
    length.
  - Pruning on delete: the descent path is remembered and replayed bottom-up
    to unlink every node that no longer holds a value or a child.
  - Generator-based enumeration: ``keys_with_prefix`` and
    ``keys_that_match`` yield results lazily in ascending character order.

Complexity (n = key length, m = number of matches, R = radix):
  put / get / delete          — O(n) (delete adds O(R) per pruned node)
  longest_prefix_of           — O(n)
  keys_with_prefix            — O(n + m·R)
  Memory                      — O(R) links per node
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

DEFAULT_RADIX = 256
WILDCARD = "."


class AlphabetError(ValueError):
    """A key contains a character whose code is outside the trie's alphabet."""


@dataclass
class _WideNode:
    """Internal node: a value slot plus one link per alphabet character."""

    children: list[_WideNode | None]
    is_end: bool = False
    value: Any = None

    def is_empty(self) -> bool:
        return not self.is_end and all(child is None for child in self.children)


class WideTrie:
    """An R-way trie mapping string keys to arbitrary values.

    >>> t = WideTrie()
    >>> t.put("app", 1)
    >>> t.put("applic", 2)
    >>> t.put("appl", 3)
    >>> t.get("appl")
    3
    >>> t.longest_prefix_of("application")
    'applic'
    >>> list(t.keys_that_match("app."))
    ['appl']
    """

    def __init__(self, radix: int = DEFAULT_RADIX) -> None:
        if radix < 1:
            raise ValueError(f"radix must be positive, got {radix}")
        self._radix = radix
        self._root: _WideNode | None = None
        self._size = 0

    @property
    def radix(self) -> int:
        return self._radix

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def put(self, key: str, value: Any = True) -> None:
        """Insert *key* with *value*, overwriting any previous value."""
        if not key:
            raise ValueError("key must be non-empty")
        codes = [self._code(ch) for ch in key]
        if self._root is None:
            self._root = self._new_node()
        node = self._root
        for c in codes:
            child = node.children[c]
            if child is None:
                child = self._new_node()
                node.children[c] = child
            node = child
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
        """Remove *key*. Returns ``True`` if it was stored."""
        path: list[tuple[_WideNode, int]] = []
        node = self._root
        for ch in key:
            if node is None:
                return False
            c = ord(ch)
            if c >= self._radix:
                return False
            path.append((node, c))
            node = node.children[c]
        if node is None or not node.is_end:
            return False
        node.is_end = False
        node.value = None
        self._size -= 1
        # Unlink dead nodes bottom-up; stop at the first node still in use.
        while path and node.is_empty():
            parent, c = path.pop()
            parent.children[c] = None
            node = parent
        if node is self._root and node.is_empty():
            self._root = None
        return True

    def starts_with(self, prefix: str) -> bool:
        """Return ``True`` if any stored key starts with *prefix*."""
        # Pruning guarantees every retained node leads to a stored key.
        return self._find_node(prefix) is not None

    def keys(self) -> Iterator[str]:
        """Yield every stored key in ascending order."""
        return self.keys_with_prefix("")

    def keys_with_prefix(self, prefix: str) -> Iterator[str]:
        """Yield all keys that begin with *prefix*, lazily."""
        node = self._find_node(prefix)
        if node is None:
            return
        stack: list[tuple[_WideNode, str]] = [(node, prefix)]
        while stack:
            current, acc = stack.pop()
            if current.is_end:
                yield acc
            # Pushed in reverse so the smallest code is popped first.
            for c in range(self._radix - 1, -1, -1):
                child = current.children[c]
                if child is not None:
                    stack.append((child, acc + chr(c)))

    def keys_that_match(self, pattern: str) -> Iterator[str]:
        """Yield keys of exactly ``len(pattern)`` characters matching *pattern*.

        ``.`` in the pattern matches any single character.
        """
        if self._root is None or not pattern:
            return
        stack: list[tuple[_WideNode, str]] = [(self._root, "")]
        while stack:
            current, acc = stack.pop()
            d = len(acc)
            if d == len(pattern):
                if current.is_end:
                    yield acc
                continue
            wanted = pattern[d]
            if wanted == WILDCARD:
                codes: range | tuple[int, ...] = range(self._radix - 1, -1, -1)
            elif ord(wanted) < self._radix:
                codes = (ord(wanted),)
            else:
                codes = ()
            for c in codes:
                child = current.children[c]
                if child is not None:
                    stack.append((child, acc + chr(c)))

    def longest_prefix_of(self, s: str) -> str:
        """Return the longest stored key that is a prefix of *s* (``""`` if none)."""
        node = self._root
        length = 0
        d = 0
        while node is not None:
            if node.is_end:
                length = d
            if d == len(s):
                break
            c = ord(s[d])
            if c >= self._radix:
                break
            node = node.children[c]
            d += 1
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

    def _new_node(self) -> _WideNode:
        return _WideNode(children=[None] * self._radix)

    def _code(self, ch: str) -> int:
        c = ord(ch)
        if c >= self._radix:
            raise AlphabetError(
                f"character {ch!r} (code {c}) is outside the alphabet of size {self._radix}"
            )
        return c

    def _find_node(self, key: str) -> _WideNode | None:
        """Walk the trie following *key*; return the landing node or None."""
        node = self._root
        for ch in key:
            if node is None:
                return None
            c = ord(ch)
            if c >= self._radix:
                return None
            node = node.children[c]
        return node

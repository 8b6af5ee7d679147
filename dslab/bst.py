"""Binary search trees keyed by integers.

``BinarySearchTree`` stores records (a key with a name). Equal keys go to
the right. A node with two children is replaced by its in-order predecessor.
``KeyTree`` stores bare keys. A node with two children is replaced by its
in-order successor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class Record:
    """A single entry of a :class:`BinarySearchTree`."""

    key: int
    name: str


@dataclass
class _Node:
    record: Record
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """An unbalanced binary search tree of :class:`Record` values."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._count = 0

    def insert(self, key: int, name: str) -> Record:
        """Add a record at a leaf and return it. Duplicate keys go right."""
        node = _Node(Record(key, name))
        if self._root is None:
            self._root = node
        else:
            current = self._root
            while True:
                if key < current.record.key:
                    if current.left is None:
                        current.left = node
                        break
                    current = current.left
                else:
                    if current.right is None:
                        current.right = node
                        break
                    current = current.right
        self._count += 1
        return node.record

    def search(self, key: int) -> Record:
        """Return the record nearest the root with ``key``.

        Raises KeyError if no record has that key.
        """
        current = self._root
        while current is not None:
            if key < current.record.key:
                current = current.left
            elif key > current.record.key:
                current = current.right
            else:
                return current.record
        raise KeyError(key)

    def delete(self, key: int) -> Record:
        """Remove the record nearest the root with ``key`` and return it.

        Raises KeyError, leaving the tree unchanged, if the key is absent.
        """
        removed = self.search(key)
        self._root = self._delete(self._root, key)
        self._count -= 1
        return removed

    @classmethod
    def _delete(cls, root: Optional[_Node], key: int) -> Optional[_Node]:
        if root is None:
            raise KeyError(key)
        if key < root.record.key:
            root.left = cls._delete(root.left, key)
        elif key > root.record.key:
            root.right = cls._delete(root.right, key)
        elif root.left is not None and root.right is not None:
            predecessor = root.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            root.record = predecessor.record
            root.left = cls._delete(root.left, predecessor.record.key)
        elif root.left is None:
            return root.right
        else:
            return root.left
        return root

    def inorder(self) -> Iterator[Record]:
        """Yield records in left, node, right order."""
        def walk(node: Optional[_Node]) -> Iterator[Record]:
            if node is not None:
                yield from walk(node.left)
                yield node.record
                yield from walk(node.right)

        return walk(self._root)

    def preorder(self) -> Iterator[Record]:
        """Yield records in node, left, right order."""
        def walk(node: Optional[_Node]) -> Iterator[Record]:
            if node is not None:
                yield node.record
                yield from walk(node.left)
                yield from walk(node.right)

        return walk(self._root)

    def postorder(self) -> Iterator[Record]:
        """Yield records in left, right, node order."""
        def walk(node: Optional[_Node]) -> Iterator[Record]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.record

        return walk(self._root)

    def clear(self) -> None:
        """Remove every record."""
        self._root = None
        self._count = 0

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        try:
            self.search(key)
        except KeyError:
            return False
        return True


@dataclass
class _KeyNode:
    key: int
    left: Optional[_KeyNode] = None
    right: Optional[_KeyNode] = None


class KeyTree:
    """A binary search tree of bare integer keys."""

    def __init__(self) -> None:
        self._root: Optional[_KeyNode] = None

    def insert(self, key: int) -> None:
        """Add ``key`` at a leaf. Duplicate keys go right."""
        self._root = self._insert(self._root, key)

    @classmethod
    def _insert(cls, node: Optional[_KeyNode], key: int) -> _KeyNode:
        if node is None:
            return _KeyNode(key)
        if key < node.key:
            node.left = cls._insert(node.left, key)
        else:
            node.right = cls._insert(node.right, key)
        return node

    def delete(self, key: int) -> None:
        """Remove one occurrence of ``key``. An absent key changes nothing."""
        self._root = self._delete(self._root, key)

    @classmethod
    def _delete(cls, root: Optional[_KeyNode], key: int) -> Optional[_KeyNode]:
        if root is None:
            return None
        if key < root.key:
            root.left = cls._delete(root.left, key)
        elif key > root.key:
            root.right = cls._delete(root.right, key)
        elif root.left is None:
            return root.right
        elif root.right is None:
            return root.left
        else:
            successor = root.right
            while successor.left is not None:
                successor = successor.left
            root.key = successor.key
            root.right = cls._delete(root.right, successor.key)
        return root

    def inorder(self) -> Iterator[int]:
        """Yield keys in ascending order."""
        def walk(node: Optional[_KeyNode]) -> Iterator[int]:
            if node is not None:
                yield from walk(node.left)
                yield node.key
                yield from walk(node.right)

        return walk(self._root)

    def __contains__(self, key: object) -> bool:
        current = self._root
        while current is not None:
            if key == current.key:
                return True
            current = current.left if key < current.key else current.right  # type: ignore[operator]
        return False
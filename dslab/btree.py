"""A B-tree of distinct integers holding at most four keys per node.

Every node except the root keeps at least two keys. A full node that takes
one more key is split around the median of the five, which moves up to the
parent. A key removed from an internal node is replaced by its in-order
successor. A child left with too few keys first borrows from its left
sibling, then from its right sibling, and is merged with a sibling
otherwise.
"""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Iterator, Optional, TextIO

MAX_KEYS = 4
MIN_KEYS = 2
END_OF_INPUT = 99999


class DuplicateValueError(ValueError):
    """Raised when a value already in the tree is inserted again."""


@dataclass
class _Node:
    keys: list[int] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class BTree:
    """A B-tree of distinct integer values."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._count = 0

    def insert(self, value: int) -> None:
        """Add ``value``. Raises DuplicateValueError if it is already present."""
        if self._root is None:
            self._root = _Node([value])
        else:
            split = self._insert(self._root, value)
            if split is not None:
                median, right = split
                self._root = _Node([median], [self._root, right])
        self._count += 1

    @classmethod
    def _insert(cls, node: _Node, value: int) -> Optional[tuple[int, _Node]]:
        pos = bisect_right(node.keys, value)
        if pos > 0 and node.keys[pos - 1] == value:
            raise DuplicateValueError(f"Duplicates not allowed: {value}")
        if node.is_leaf:
            node.keys.insert(pos, value)
        else:
            split = cls._insert(node.children[pos], value)
            if split is None:
                return None
            median, right = split
            node.keys.insert(pos, median)
            node.children.insert(pos + 1, right)
        if len(node.keys) <= MAX_KEYS:
            return None
        middle = len(node.keys) // 2
        median = node.keys[middle]
        right = _Node(node.keys[middle + 1:], node.children[middle + 1:])
        node.keys = node.keys[:middle]
        node.children = node.children[:middle + 1]
        return median, right

    def delete(self, value: int) -> None:
        """Remove ``value``. Raises KeyError if it is not present."""
        if self._root is None or not self._delete(self._root, value):
            raise KeyError(value)
        if not self._root.keys:
            self._root = self._root.children[0] if self._root.children else None
        self._count -= 1

    @classmethod
    def _delete(cls, node: _Node, value: int) -> bool:
        pos = bisect_right(node.keys, value)
        found = pos > 0 and node.keys[pos - 1] == value
        if found:
            if node.is_leaf:
                del node.keys[pos - 1]
                return True
            successor = node.children[pos]
            while not successor.is_leaf:
                successor = successor.children[0]
            node.keys[pos - 1] = successor.keys[0]
            cls._delete(node.children[pos], successor.keys[0])
        else:
            if node.is_leaf:
                return False
            found = cls._delete(node.children[pos], value)
        if len(node.children[pos].keys) < MIN_KEYS:
            cls._adjust(node, pos)
        return found

    @classmethod
    def _adjust(cls, node: _Node, pos: int) -> None:
        children = node.children
        if pos == 0:
            if len(children[1].keys) > MIN_KEYS:
                cls._shift_left(node, 1)
            else:
                cls._merge(node, 1)
        elif pos != len(node.keys):
            if len(children[pos - 1].keys) > MIN_KEYS:
                cls._shift_right(node, pos)
            elif len(children[pos + 1].keys) > MIN_KEYS:
                cls._shift_left(node, pos + 1)
            else:
                cls._merge(node, pos)
        elif len(children[pos - 1].keys) > MIN_KEYS:
            cls._shift_right(node, pos)
        else:
            cls._merge(node, pos)

    @staticmethod
    def _shift_right(node: _Node, pos: int) -> None:
        """Move a key from the left sibling through the parent into child ``pos``."""
        left, target = node.children[pos - 1], node.children[pos]
        target.keys.insert(0, node.keys[pos - 1])
        node.keys[pos - 1] = left.keys.pop()
        if left.children:
            target.children.insert(0, left.children.pop())

    @staticmethod
    def _shift_left(node: _Node, pos: int) -> None:
        """Move a key from child ``pos`` through the parent into its left sibling."""
        left, source = node.children[pos - 1], node.children[pos]
        left.keys.append(node.keys[pos - 1])
        node.keys[pos - 1] = source.keys.pop(0)
        if source.children:
            left.children.append(source.children.pop(0))

    @staticmethod
    def _merge(node: _Node, pos: int) -> None:
        """Fold child ``pos`` and the separating key into its left sibling."""
        left, right = node.children[pos - 1], node.children[pos]
        left.keys.append(node.keys.pop(pos - 1))
        left.keys.extend(right.keys)
        left.children.extend(right.children)
        del node.children[pos]

    def search(self, value: int) -> bool:
        """Return whether ``value`` is stored in the tree."""
        node = self._root
        while node is not None:
            pos = bisect_right(node.keys, value)
            if pos > 0 and node.keys[pos - 1] == value:
                return True
            node = None if node.is_leaf else node.children[pos]
        return False

    def traverse(self) -> Iterator[int]:
        """Yield every value in ascending order."""
        def walk(node: Optional[_Node]) -> Iterator[int]:
            if node is None:
                return
            if node.is_leaf:
                yield from node.keys
                return
            for child, key in zip(node.children, node.keys):
                yield from walk(child)
                yield key
            yield from walk(node.children[-1])

        return walk(self._root)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value)

    def __len__(self) -> int:
        return self._count


MENU = (
    "\n1. Insertion\n2. Deletion\n3. Searching\n4. Traversal\n5. Exit\n"
    "Enter your choice:"
)


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _read_value(lines: Iterator[str], stdout: TextIO) -> Optional[int]:
    for line in lines:
        value = _parse_int(line)
        if value is not None:
            return value
        stdout.write("Invalid input please provide an integer\n")
    return None


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the interactive menu until the user exits or input ends."""
    tree = BTree()
    lines = iter(stdin)
    while True:
        stdout.write(MENU)
        line = next(lines, None)
        if line is None:
            break
        choice = _parse_int(line)
        if choice is None or choice < 0:
            stdout.write("Invalid input please select any Integer between 1-5\n")
            continue
        if choice == 1:
            while True:
                stdout.write(
                    "please insert an element \n After entering all your "
                    f"elements please type '{END_OF_INPUT}': "
                )
                entry = next(lines, None)
                if entry is None:
                    break
                value = _parse_int(entry)
                if value is None:
                    stdout.write("please Provide Integer values to construct B-Tree\n\n")
                    break
                if value == END_OF_INPUT:
                    break
                try:
                    tree.insert(value)
                except DuplicateValueError:
                    stdout.write("Duplicates not allowed\n")
        elif choice == 2:
            stdout.write("Enter the element to delete:")
            value = _read_value(lines, stdout)
            if value is None:
                break
            try:
                tree.delete(value)
            except KeyError:
                stdout.write("Given value is not present in B-Tree\n")
        elif choice == 3:
            stdout.write("Enter the element to search:")
            value = _read_value(lines, stdout)
            if value is None:
                break
            if tree.search(value):
                stdout.write(f"Given data {value} is present in B-Tree")
        elif choice == 4:
            stdout.write("".join(f"{value} " for value in tree.traverse()))
        elif choice == 5:
            stdout.write("\nExitted\n")
            break
        else:
            stdout.write("U have entered wrong option!!\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: run the menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dslab-btree", description="Interactive B-tree of integers."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
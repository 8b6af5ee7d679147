"""Interactive menu over a :class:`~dslab.bst.BinarySearchTree` of roll numbers."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, TextIO

from dslab.bst import BinarySearchTree

MENU = (
    "\n1> Insert\n2> inTraverse\n3> postTraverse\n4> preTraverse\n"
    "5> Search\n6> Delete\n7> EXIT\n"
)
INVALID_CHOICE_INPUT = "Invalid input please select any Integer between 1-7\n"
INVALID_RECORD = (
    "Invalid input! Please enter an integer for roll no. and a string for name.\n"
)
INVALID_KEY = "Invalid input! Please enter a roll no of integer data type.\n"
EMPTY = "\n no Elemented is inserted\n"


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def _read_record(lines: Iterator[str], stdout: TextIO) -> Optional[tuple[int, str]]:
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        key = _parse_int(tokens[0])
        if key is not None and len(tokens) >= 2:
            return key, tokens[1]
        stdout.write(INVALID_RECORD)
    return None


def _read_key(lines: Iterator[str], stdout: TextIO) -> Optional[int]:
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        key = _parse_int(tokens[0])
        if key is not None:
            return key
        stdout.write(INVALID_KEY)
    return None


def _write_records(stdout: TextIO, heading: str, records) -> None:
    stdout.write(heading)
    for record in records:
        stdout.write(f"{record.key} {record.name}\n")


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends."""
    stdout.write("This program is For making Binary Search Tree")
    stdout.write("\nPlease Enter Valid Choice :-")
    tree = BinarySearchTree()
    lines = iter(stdin)
    while True:
        stdout.write(MENU)
        line = next(lines, None)
        if line is None:
            break
        choice = _parse_int(line.strip())
        if choice is None or choice < 0:
            stdout.write(INVALID_CHOICE_INPUT)
            continue
        if choice == 1:
            stdout.write(
                "\nEnter the values to be inserted like Roll number and Name\n:-\t"
            )
            entry = _read_record(lines, stdout)
            if entry is None:
                break
            key, name = entry
            tree.insert(key, name)
            stdout.write(f"\n {key} &  {name} Inserted")
        elif choice in (2, 3, 4):
            if tree.is_empty():
                stdout.write(EMPTY)
            elif choice == 2:
                _write_records(stdout, "\nIn Traverse : \n", tree.inorder())
            elif choice == 3:
                _write_records(stdout, "\nPost Traverse : \n", tree.postorder())
            else:
                _write_records(stdout, "\nPre Traverse : \n", tree.preorder())
        elif choice == 5:
            if tree.is_empty():
                stdout.write("underFlow")
                continue
            key = _read_key(lines, stdout)
            if key is None:
                break
            stdout.write("\nData Found" if key in tree else "Not Found")
        elif choice == 6:
            if tree.is_empty():
                stdout.write("\nUnderflow")
                continue
            key = _read_key(lines, stdout)
            if key is None:
                break
            try:
                tree.delete(key)
            except KeyError:
                stdout.write("\n NOT FOUND")
            else:
                stdout.write(f"\nDEL SuccessFul {key}")
        elif choice == 7:
            stdout.write("\nEXIT")
            break
        else:
            stdout.write("\nInvalid choice please choose between 1-7")
    tree.clear()
    stdout.write("\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: run the menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dslab-bst", description="Binary search tree of roll numbers and names."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
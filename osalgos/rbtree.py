"""A red-black tree of unique keys supporting insertion and deletion."""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Sequence


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


class DuplicateKeyError(ValueError):
    """Raised when a key that is already in the tree is inserted again."""

    def __init__(self, key: Any) -> None:
        super().__init__("Duplicates Not Allowed!!")
        self.key = key


class _Node:
    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(self, key: Any, color: Color, nil: Optional["_Node"] = None) -> None:
        self.key = key
        self.color = color
        self.left = nil if nil is not None else self
        self.right = nil if nil is not None else self
        self.parent = nil if nil is not None else self


class RedBlackTree:
    """Self-balancing binary search tree; iteration yields keys in order."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._nil = _Node(None, Color.BLACK)
        self._root = self._nil
        self._size = 0
        for key in keys:
            self.insert(key)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not self._nil

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def _find(self, key: Any) -> _Node:
        node = self._root
        while node is not self._nil and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def _rotate_left(self, node: _Node) -> None:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not self._nil:
            pivot.left.parent = node
        pivot.parent = node.parent
        if node.parent is self._nil:
            self._root = pivot
        elif node is node.parent.left:
            node.parent.left = pivot
        else:
            node.parent.right = pivot
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node) -> None:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not self._nil:
            pivot.right.parent = node
        pivot.parent = node.parent
        if node.parent is self._nil:
            self._root = pivot
        elif node is node.parent.right:
            node.parent.right = pivot
        else:
            node.parent.left = pivot
        pivot.right = node
        node.parent = pivot

    def insert(self, key: Any) -> None:
        """Add ``key``; raise DuplicateKeyError if it is already present."""
        parent = self._nil
        node = self._root
        while node is not self._nil:
            if key == node.key:
                raise DuplicateKeyError(key)
            parent = node
            node = node.left if key < node.key else node.right
        new = _Node(key, Color.RED, self._nil)
        new.parent = parent
        if parent is self._nil:
            self._root = new
        elif key < parent.key:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        self._insert_fixup(new)

    def _insert_fixup(self, node: _Node) -> None:
        while node.parent.color is Color.RED:
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_left(grand)
        self._root.color = Color.BLACK

    def _transplant(self, old: _Node, new: _Node) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def delete(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is not in the tree."""
        target = self._find(key)
        if target is self._nil:
            raise KeyError(key)
        removed_color = target.color
        if target.left is self._nil:
            child = target.right
            self._transplant(target, target.right)
        elif target.right is self._nil:
            child = target.left
            self._transplant(target, target.left)
        else:
            successor = target.right
            while successor.left is not self._nil:
                successor = successor.left
            removed_color = successor.color
            child = successor.right
            if successor.parent is target:
                child.parent = successor
            else:
                self._transplant(successor, successor.right)
                successor.right = target.right
                successor.right.parent = successor
            self._transplant(target, successor)
            successor.left = target.left
            successor.left.parent = successor
            successor.color = target.color
        self._size -= 1
        if removed_color is Color.BLACK:
            self._delete_fixup(child)
        self._nil.parent = self._nil

    def _delete_fixup(self, node: _Node) -> None:
        while node is not self._root and node.color is Color.BLACK:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                    continue
                if sibling.right.color is Color.BLACK:
                    sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_right(sibling)
                    sibling = parent.right
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
            else:
                sibling = parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                    continue
                if sibling.left.color is Color.BLACK:
                    sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_left(sibling)
                    sibling = parent.left
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
            node = self._root
        node.color = Color.BLACK


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osalgos-rbtree", description="Build a red-black tree and print it in order."
    )
    parser.add_argument("keys", type=int, nargs="*", default=[7, 6, 5, 4, 3, 2, 1])
    parser.add_argument("--delete", type=int, nargs="+", default=[])
    args = parser.parse_args(argv)

    tree = RedBlackTree()
    for key in args.keys:
        try:
            tree.insert(key)
        except DuplicateKeyError as exc:
            print(exc)
    for key in args.delete:
        try:
            tree.delete(key)
        except KeyError:
            parser.error(f"key {key} is not in the tree")
    print("Inorder Traversal of Created Tree")
    print(" ".join(str(key) for key in tree))
    return 0
"""Red-black tree of integers with parent links and double-black removal."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class Color(enum.Enum):
    """Node colour; the value is the label used in pre-order listings."""

    RED = "R"
    BLACK = "B"
    DOUBLE_BLACK = "DB"


@dataclass(eq=False)
class Node:
    """A tree node. Missing children and parents are ``None`` and count as black."""

    value: Optional[int]
    color: Color = Color.RED
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)

    def is_left_child(self) -> bool:
        return self.parent is not None and self.parent.left is self

    def is_root(self) -> bool:
        return self.parent is None

    def grandparent(self) -> Optional[Node]:
        return self.parent.parent if self.parent is not None else None

    def uncle(self) -> Optional[Node]:
        grand = self.grandparent()
        if grand is None:
            return None
        return grand.right if self.parent.is_left_child() else grand.left

    def sibling(self) -> Optional[Node]:
        if self.parent is None:
            return None
        return self.parent.right if self.is_left_child() else self.parent.left


def _color(node: Optional[Node]) -> Color:
    return Color.BLACK if node is None else node.color


def _child_colors(node: Optional[Node]) -> tuple[Color, Color]:
    if node is None:
        return Color.BLACK, Color.BLACK
    return _color(node.left), _color(node.right)


class RedBlackTree:
    """A set of distinct integers kept in a red-black tree."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self._find(value, self.root) is not None

    def __iter__(self) -> Iterator[int]:
        """Yield the values in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def preorder(self) -> Iterator[tuple[int, Color]]:
        """Yield ``(value, colour)`` pairs in pre-order."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value, node.color
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def format_preorder(self) -> str:
        """Render the pre-order listing as ``[value C]`` items."""
        return "".join(f"[{value} {color.value}]" for value, color in self.preorder())

    # -- structure -------------------------------------------------------

    def _find(self, value: object, start: Optional[Node]) -> Optional[Node]:
        node = start
        while node is not None:
            if node.value == value:
                return node
            node = node.right if value > node.value else node.left
        return None

    def _replace_child(self, old: Node, new: Optional[Node]) -> None:
        parent = old.parent
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, a: Node) -> None:
        b = a.right
        d = b.left
        self._replace_child(a, b)
        b.parent = a.parent
        b.left = a
        a.parent = b
        a.right = d
        if d is not None:
            d.parent = a

    def _rotate_right(self, a: Node) -> None:
        b = a.left
        d = b.right
        self._replace_child(a, b)
        b.parent = a.parent
        b.right = a
        a.parent = b
        a.left = d
        if d is not None:
            d.parent = a

    # -- insertion -------------------------------------------------------

    def insert(self, value: int) -> bool:
        """Add ``value``; return False if it was already present."""
        parent: Optional[Node] = None
        node = self.root
        while node is not None:
            if value == node.value:
                return False
            parent = node
            node = node.left if value < node.value else node.right

        new = Node(value, parent=parent)
        if parent is None:
            self.root = new
        elif value < parent.value:
            parent.left = new
        else:
            parent.right = new
        self._size += 1

        self._fix_insert(new)
        self.root.color = Color.BLACK
        return True

    def _fix_insert(self, node: Node) -> None:
        while _color(node.parent) is Color.RED:
            parent = node.parent
            uncle = node.uncle()
            if _color(uncle) is Color.RED:
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                node.grandparent().color = Color.RED
                node = node.grandparent()
                continue

            if parent.is_left_child():
                if not node.is_left_child():
                    node = parent
                    self._rotate_left(node)
                node.parent.color = Color.BLACK
                node.grandparent().color = Color.RED
                self._rotate_right(node.grandparent())
            else:
                if node.is_left_child():
                    node = parent
                    self._rotate_right(node)
                node.parent.color = Color.BLACK
                node.grandparent().color = Color.RED
                self._rotate_left(node.grandparent())
            break

    # -- removal ---------------------------------------------------------

    def remove(self, value: int) -> bool:
        """Delete ``value``; return False if it was not present."""
        target = self._find(value, self.root)
        if target is None:
            return False

        while True:
            if target.left is not None and target.right is not None:
                replacement = target.left
                while replacement.right is not None:
                    replacement = replacement.right
            elif target.left is not None:
                replacement = target.left
            elif target.right is not None:
                replacement = target.right
            else:
                break
            target.value = replacement.value
            target = replacement

        self._remove_leaf(target)
        self._size -= 1
        return True

    def _remove_leaf(self, leaf: Node) -> None:
        if leaf.parent is None:
            self.root = None
            return
        if leaf.color is Color.RED:
            self._replace_child(leaf, None)
            return

        placeholder = Node(None, Color.DOUBLE_BLACK, parent=leaf.parent)
        self._replace_child(leaf, placeholder)
        self._fix_double_black(placeholder)
        self._replace_child(placeholder, None)
        placeholder.parent = None

    def _fix_double_black(self, node: Node) -> None:
        while node.color is Color.DOUBLE_BLACK:
            if node.parent is None:
                logger.debug("double black: case i")
                node.color = Color.BLACK
                return

            parent = node.parent
            sibling = node.sibling()
            parent_color, sibling_color = _color(parent), _color(sibling)
            near_left, near_right = _child_colors(sibling)
            nephews_black = near_left is Color.BLACK and near_right is Color.BLACK
            on_left = node.is_left_child()

            if parent_color is Color.BLACK and sibling_color is Color.RED and nephews_black:
                logger.debug("double black: case ii")
                sibling.color = Color.BLACK
                parent.color = Color.RED
                if on_left:
                    self._rotate_left(parent)
                else:
                    self._rotate_right(parent)
            elif parent_color is Color.BLACK and sibling_color is Color.BLACK and nephews_black:
                logger.debug("double black: case iii")
                if sibling is not None:
                    sibling.color = Color.RED
                node.color = Color.BLACK
                parent.color = Color.DOUBLE_BLACK
                node = parent
            elif parent_color is Color.RED and sibling_color is Color.BLACK and nephews_black:
                logger.debug("double black: case iv")
                parent.color = Color.BLACK
                if sibling is not None:
                    sibling.color = Color.RED
                node.color = Color.BLACK
            elif (
                on_left
                and sibling_color is Color.BLACK
                and near_left is Color.RED
                and near_right is Color.BLACK
            ):
                logger.debug("double black: case v-i")
                sibling.color = Color.RED
                sibling.left.color = Color.BLACK
                self._rotate_right(sibling)
            elif (
                not on_left
                and sibling_color is Color.BLACK
                and near_left is Color.BLACK
                and near_right is Color.RED
            ):
                logger.debug("double black: case v-ii")
                sibling.color = Color.RED
                sibling.right.color = Color.BLACK
                self._rotate_left(sibling)
            elif on_left and sibling_color is Color.BLACK and near_right is Color.RED:
                logger.debug("double black: case vi-i")
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
                node.color = Color.BLACK
            elif not on_left and sibling_color is Color.BLACK and near_left is Color.RED:
                logger.debug("double black: case vi-ii")
                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
                node.color = Color.BLACK
            else:
                return
#!/usr/bin/env python3
"""
Arbor - In-memory data structures built around a binary search tree.

Architecture: Functional Core, Imperative Shell
- Data: dataclasses (frozen for reports, mutable for container nodes)
- Computations: containers, the tree and the sorts (no I/O, no printing)
- Renderers: pure functions (data → str)
- Actions: argument parsing and printing at the edge only
"""

from __future__ import annotations

import json
import logging
import random
import re
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Literal,
    MutableSequence,
    Protocol,
    Sequence,
    TypeVar,
)

logger = logging.getLogger(__name__)


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T")
CT = TypeVar("CT", bound=Comparable)


# =============================================================================
# ERRORS
# =============================================================================


class ArborError(Exception):
    """Base class for arbor errors."""


class EmptyContainerError(ArborError, IndexError):
    """Raised when reading from or removing out of an empty container."""


class DuplicateItemError(ArborError, ValueError):
    """Raised when adding an item a Set already holds."""


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================


class TraversalOrder(Enum):
    """Order in which a tree's values are visited."""

    IN_ORDER = auto()
    PRE_ORDER = auto()
    POST_ORDER = auto()
    IN_ORDER_ITERATIVE = auto()


@dataclass(eq=False)
class TreeNode(Generic[CT]):
    """A tree node. Each child link exclusively owns its subtree."""

    value: CT
    left: TreeNode[CT] | None = field(default=None, repr=False)
    right: TreeNode[CT] | None = field(default=None, repr=False)


@dataclass(frozen=True)
class SearchResult(Generic[CT]):
    """Outcome of a parent-tracking search (pure data)."""

    node: TreeNode[CT] | None  # None if the value is absent
    parent: TreeNode[CT] | None  # None if node is the root

    @property
    def found(self) -> bool:
        return self.node is not None


@dataclass(eq=False)
class LinkedListNode(Generic[T]):
    value: T
    next: LinkedListNode[T] | None = field(default=None, repr=False)
    previous: LinkedListNode[T] | None = field(default=None, repr=False)


@dataclass(frozen=True)
class Traversal:
    """Values visited in one traversal order (pure data)."""

    order: TraversalOrder
    values: tuple[Any, ...]


@dataclass(frozen=True)
class Removal:
    value: Any
    removed: bool


@dataclass(frozen=True)
class TreeReport:
    """Everything the shell reports about a built tree (pure data)."""

    inserted: int
    count: int
    height: int
    removals: tuple[Removal, ...]
    traversals: tuple[Traversal, ...]


# =============================================================================
# LINEAR CONTAINERS
# =============================================================================


class LinkedList(Generic[T]):
    """A doubly linked list with O(1) access to both ends."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: LinkedListNode[T] | None = None
        self._tail: LinkedListNode[T] | None = None
        self._count = 0
        for item in items:
            self.add_last(item)

    @property
    def head(self) -> LinkedListNode[T] | None:
        return self._head

    @property
    def tail(self) -> LinkedListNode[T] | None:
        return self._tail

    @property
    def count(self) -> int:
        return self._count

    def add_first(self, value: T) -> None:
        node = LinkedListNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.previous = node
        self._head = node
        self._count += 1

    def add_last(self, value: T) -> None:
        node = LinkedListNode(value, previous=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    add = add_last

    def remove_first(self) -> None:
        """Drop the first node. Does nothing on an empty list."""
        if self._head is None:
            return
        self._head = self._head.next
        self._count -= 1
        if self._head is None:
            self._tail = None
        else:
            self._head.previous = None

    def remove_last(self) -> None:
        """Drop the last node. Does nothing on an empty list."""
        if self._tail is None:
            return
        self._tail = self._tail.previous
        self._count -= 1
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None

    def remove(self, item: T) -> bool:
        """Remove the first node equal to item. Returns False if none matched."""
        current = self._head
        while current is not None:
            if current.value == item:
                if current.previous is None:
                    self.remove_first()
                elif current.next is None:
                    self.remove_last()
                else:
                    current.previous.next = current.next
                    current.next.previous = current.previous
                    self._count -= 1
                return True
            current = current.next
        return False

    def contains(self, item: T) -> bool:
        return any(value == item for value in self)

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._count = 0

    def copy_to(self, array: MutableSequence[T], index: int) -> None:
        for offset, value in enumerate(self):
            array[index + offset] = value

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __reversed__(self) -> Iterator[T]:
        current = self._tail
        while current is not None:
            yield current.value
            current = current.previous

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]


class ArrayList(Generic[T]):
    """A growable array list.

    The backing array grows to 16 slots when empty, otherwise doubles.
    Indexing is bounded by count, not by capacity.
    """

    __slots__ = ("_items", "_count")

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._items: list[T | None] = [None] * capacity
        self._count = 0

    def _grow(self) -> None:
        new_cap = 16 if not self._items else len(self._items) * 2
        self._items = self._items + [None] * (new_cap - len(self._items))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexError(f"index {index} out of range for count {self._count}")

    @property
    def count(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return len(self._items)

    def add(self, item: T) -> None:
        if self._count == len(self._items):
            self._grow()
        self._items[self._count] = item
        self._count += 1

    def insert(self, index: int, item: T) -> None:
        """Insert before the item currently at index (index must be < count)."""
        self._check_index(index)
        if self._count == len(self._items):
            self._grow()
        for i in range(self._count, index, -1):
            self._items[i] = self._items[i - 1]
        self._items[index] = item
        self._count += 1

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        for i in range(index, self._count - 1):
            self._items[i] = self._items[i + 1]
        self._count -= 1
        self._items[self._count] = None

    def remove(self, item: T) -> bool:
        index = self.index_of(item)
        if index < 0:
            return False
        self.remove_at(index)
        return True

    def index_of(self, item: T) -> int:
        """Index of the first item equal to item, or -1."""
        for i in range(self._count):
            if self._items[i] == item:
                return i
        return -1

    def contains(self, item: T) -> bool:
        return self.index_of(item) > -1

    def clear(self) -> None:
        self._items = []
        self._count = 0

    def copy_to(self, array: MutableSequence[T], index: int) -> None:
        for offset, value in enumerate(self):
            array[index + offset] = value

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]  # type: ignore[return-value]

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index)
        self._items[index] = item

    def __iter__(self) -> Iterator[T]:
        for i in range(self._count):
            yield self._items[i]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._count

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]


class Stack(Generic[T]):
    """A dynamic array-backed LIFO stack.

    Operations: push, pop, peek, is_empty, count.
    Time: Amortized O(1).
    """

    __slots__ = ("_data", "_top")

    def __init__(self, capacity: int = 16) -> None:
        if capacity <= 0:
            capacity = 16
        self._data: list[T | None] = [None] * capacity
        self._top = 0  # next free slot

    def _grow(self) -> None:
        old = self._data
        self._data = old + [None] * len(old)

    @property
    def count(self) -> int:
        return self._top

    def push(self, value: T) -> None:
        if self._top == len(self._data):
            self._grow()
        self._data[self._top] = value
        self._top += 1

    def pop(self) -> T:
        if self._top == 0:
            raise EmptyContainerError("pop from empty stack")
        self._top -= 1
        value = self._data[self._top]
        self._data[self._top] = None
        return value  # type: ignore[return-value]

    def peek(self) -> T:
        if self._top == 0:
            raise EmptyContainerError("peek from empty stack")
        return self._data[self._top - 1]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._top == 0

    def __iter__(self) -> Iterator[T]:
        """Top to bottom, the order pop would return them."""
        for i in range(self._top - 1, -1, -1):
            yield self._data[i]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._top


class Queue(Generic[T]):
    """FIFO queue over a LinkedList: enqueue at the head, dequeue from the tail."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: LinkedList[T] = LinkedList()

    @property
    def count(self) -> int:
        return self._items.count

    def enqueue(self, value: T) -> None:
        self._items.add_first(value)

    def dequeue(self) -> T:
        value = self.peek()
        self._items.remove_last()
        return value

    def peek(self) -> T:
        tail = self._items.tail
        if tail is None:
            raise EmptyContainerError("the queue is empty")
        return tail.value

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return self._items.count


class Deque(Generic[T]):
    """A circular-buffer double-ended queue.

    Capacity starts at zero, grows to 4 on first use and doubles when full.
    Growing for enqueue_first leaves slot 0 free so the head can step back
    into it without wrapping.
    """

    __slots__ = ("_data", "_head", "_size")

    def __init__(self) -> None:
        self._data: list[T | None] = []
        self._head = 0
        self._size = 0

    def _grow(self, starting_index: int) -> None:
        old = self._data
        new_cap = 4 if self._size == 0 else self._size * 2
        self._data = [None] * new_cap
        for i in range(self._size):
            self._data[starting_index + i] = old[(self._head + i) % len(old)]
        self._head = starting_index

    def _tail_index(self) -> int:
        return (self._head + self._size - 1) % len(self._data)

    @property
    def count(self) -> int:
        return self._size

    def enqueue_first(self, item: T) -> None:
        if self._size == len(self._data):
            self._grow(1)
        self._head = (self._head - 1) % len(self._data)
        self._data[self._head] = item
        self._size += 1

    def enqueue_last(self, item: T) -> None:
        if self._size == len(self._data):
            self._grow(0)
        self._data[(self._head + self._size) % len(self._data)] = item
        self._size += 1

    def dequeue_first(self) -> T:
        value = self.peek_first()
        self._data[self._head] = None
        self._head = (self._head + 1) % len(self._data)
        self._size -= 1
        return value

    def dequeue_last(self) -> T:
        value = self.peek_last()
        self._data[self._tail_index()] = None
        self._size -= 1
        return value

    def peek_first(self) -> T:
        if self._size == 0:
            raise EmptyContainerError("the deque is empty")
        return self._data[self._head]  # type: ignore[return-value]

    def peek_last(self) -> T:
        if self._size == 0:
            raise EmptyContainerError("the deque is empty")
        return self._data[self._tail_index()]  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._data[(self._head + i) % len(self._data)]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._size


class Set(Generic[T]):
    """A list-backed set of distinct items, iterated in insertion order."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self.add_range(items)

    @property
    def count(self) -> int:
        return len(self._items)

    def add(self, item: T) -> None:
        if self.contains(item):
            raise DuplicateItemError(f"item already exists in set: {item!r}")
        self._items.append(item)

    def add_range(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def remove(self, item: T) -> bool:
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def contains(self, item: T) -> bool:
        return item in self._items

    def union(self, other: Set[T]) -> Set[T]:
        result = Set(self._items)
        for item in other:
            if not self.contains(item):
                result.add(item)
        return result

    def intersection(self, other: Set[T]) -> Set[T]:
        return Set(item for item in self._items if other.contains(item))

    def difference(self, other: Set[T]) -> Set[T]:
        result = Set(self._items)
        for item in other:
            result.remove(item)
        return result

    def symmetric_difference(self, other: Set[T]) -> Set[T]:
        return self.union(other).difference(self.intersection(other))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"Set({self._items!r})"


# =============================================================================
# BINARY SEARCH TREE
# =============================================================================


class BinarySearchTree(Generic[CT]):
    """
    An unbalanced binary search tree over singly-owned nodes.

    Values less than a node go to its left subtree; values greater than or
    equal to it go right, so duplicates form chains in right subtrees. Nodes
    keep no parent link: searches report the parent alongside the match and
    the iterative traversal tracks ancestry on a Stack.

    Mutating the tree while in_order_sequence() is being consumed gives an
    undefined result.
    """

    def __init__(self, values: Iterable[CT] = ()) -> None:
        self._root: TreeNode[CT] | None = None
        self._count = 0
        for value in values:
            self.insert(value)

    @property
    def root(self) -> TreeNode[CT] | None:
        return self._root

    @property
    def count(self) -> int:
        return self._count

    @property
    def height(self) -> int:
        """Nodes on the longest root-to-leaf path (0 when empty)."""
        if self._root is None:
            return 0
        pending: Stack[tuple[TreeNode[CT], int]] = Stack()
        pending.push((self._root, 1))
        deepest = 0
        while not pending.is_empty():
            node, depth = pending.pop()
            deepest = max(deepest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    pending.push((child, depth + 1))
        return deepest

    def insert(self, value: CT) -> None:
        """Add value, duplicates included. Count always grows by one."""
        self._count += 1
        node = TreeNode(value)
        if self._root is None:
            self._root = node
            return

        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def find_with_parent(self, value: CT) -> SearchResult[CT]:
        """
        Find the first node holding value, and the node visited just before it.

        The parent is only ever recorded on a strict comparison, so a found
        node's value never equals its parent's.
        """
        parent: TreeNode[CT] | None = None
        current = self._root

        while current is not None:
            if value < current.value:
                parent, current = current, current.left
            elif current.value < value:
                parent, current = current, current.right
            else:
                break

        return SearchResult(node=current, parent=parent)

    def contains(self, value: CT) -> bool:
        return self.find_with_parent(value).found

    def remove(self, value: CT) -> bool:
        """
        Remove one occurrence of value by splicing nodes, never copying values.

        Returns False, leaving the tree untouched, if value is absent.
        """
        found = self.find_with_parent(value)
        current = found.node
        if current is None:
            return False
        self._count -= 1

        right = current.right
        if right is None:
            # Case A: the left subtree moves up.
            logger.debug("remove %r: no right child", value)
            replacement = current.left
        elif right.left is None:
            # Case B: the right child moves up and adopts the left subtree.
            logger.debug("remove %r: right child has no left child", value)
            right.left = current.left
            replacement = right
        else:
            # Case C: the left-most node of the right subtree moves up.
            successor_parent = right
            successor = right.left
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            logger.debug("remove %r: successor %r takes its place", value, successor.value)
            successor_parent.left = successor.right
            successor.left = current.left
            successor.right = current.right
            replacement = successor

        self._replace_child(found.parent, current, replacement)
        current.left = current.right = None
        return True

    def _replace_child(
        self,
        parent: TreeNode[CT] | None,
        node: TreeNode[CT],
        replacement: TreeNode[CT] | None,
    ) -> None:
        # Side is chosen by comparing values, not by node identity.
        if parent is None:
            self._root = replacement
        elif node.value < parent.value:
            parent.left = replacement
        else:
            parent.right = replacement

    def clear(self) -> None:
        self._root = None
        self._count = 0

    # -------------------------------------------------------------------------
    # Traversals
    # -------------------------------------------------------------------------

    def pre_order(self, visit: Callable[[CT], object]) -> None:
        """Visit each node before its subtrees."""
        if self._root is None:
            return
        pending: Stack[TreeNode[CT]] = Stack()
        pending.push(self._root)
        while not pending.is_empty():
            node = pending.pop()
            visit(node.value)
            # Right goes in first so the left subtree comes out first.
            if node.right is not None:
                pending.push(node.right)
            if node.left is not None:
                pending.push(node.left)

    def post_order(self, visit: Callable[[CT], object]) -> None:
        """Visit each node after both of its subtrees."""
        pending: Stack[TreeNode[CT]] = Stack()
        current = self._root
        last_visited: TreeNode[CT] | None = None
        while current is not None or not pending.is_empty():
            if current is not None:
                pending.push(current)
                current = current.left
                continue
            top = pending.peek()
            if top.right is not None and top.right is not last_visited:
                current = top.right
            else:
                visit(top.value)
                last_visited = pending.pop()

    def in_order(self, visit: Callable[[CT], object]) -> None:
        """Visit each node between its left and right subtrees."""
        pending: Stack[TreeNode[CT]] = Stack()
        current = self._root
        while current is not None or not pending.is_empty():
            while current is not None:
                pending.push(current)
                current = current.left
            node = pending.pop()
            visit(node.value)
            current = node.right

    def in_order_sequence(self) -> Iterator[CT]:
        """
        Lazily yield values in ascending order without recursion.

        Skipped ancestors wait on a Stack. The root is pushed once up front
        and sits at the bottom of the stack; popping it means every node has
        been yielded.
        """
        if self._root is None:
            return

        stack: Stack[TreeNode[CT]] = Stack()
        current = self._root
        go_left_next = True
        stack.push(current)

        while stack.count > 0:
            if go_left_next:
                # Push everything but the left-most node, which is yielded next.
                while current.left is not None:
                    stack.push(current)
                    current = current.left

            yield current.value

            if current.right is not None:
                current = current.right
                go_left_next = True
            else:
                # Already yielded once popped, so only its right side remains.
                current = stack.pop()
                go_left_next = False

    def __iter__(self) -> Iterator[CT]:
        return self.in_order_sequence()

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]


# =============================================================================
# SORTING (in place, ascending, comparisons via < only)
# =============================================================================


def _swap(items: MutableSequence[Any], left: int, right: int) -> None:
    if left != right:
        items[left], items[right] = items[right], items[left]


def bubble_sort(items: MutableSequence[CT]) -> None:
    swapped = True
    while swapped:
        swapped = False
        for i in range(1, len(items)):
            if items[i] < items[i - 1]:
                _swap(items, i - 1, i)
                swapped = True


def insertion_sort(items: MutableSequence[CT]) -> None:
    """
    Grow a sorted prefix one item at a time.

    An item smaller than its predecessor is moved to the first position
    holding a greater value, shifting the rest of the prefix right.
    """
    for end in range(1, len(items)):
        value = items[end]
        if not value < items[end - 1]:
            continue
        target = next(i for i in range(end) if value < items[i])
        for i in range(end, target, -1):
            items[i] = items[i - 1]
        items[target] = value


def selection_sort(items: MutableSequence[CT]) -> None:
    for start in range(len(items)):
        smallest = start
        for i in range(start + 1, len(items)):
            if items[i] < items[smallest]:
                smallest = i
        _swap(items, start, smallest)


def merge_sort(items: MutableSequence[CT]) -> None:
    """Split in halves, sort each copy, merge back. Stable."""
    if len(items) <= 1:
        return

    middle = len(items) // 2
    left = list(items[:middle])
    right = list(items[middle:])
    merge_sort(left)
    merge_sort(right)
    _merge(items, left, right)


def _merge(items: MutableSequence[CT], left: Sequence[CT], right: Sequence[CT]) -> None:
    left_index = right_index = 0
    for target in range(len(left) + len(right)):
        if left_index >= len(left):
            take_left = False
        elif right_index >= len(right):
            take_left = True
        else:
            take_left = not right[right_index] < left[left_index]

        if take_left:
            items[target] = left[left_index]
            left_index += 1
        else:
            items[target] = right[right_index]
            right_index += 1


def quick_sort(items: MutableSequence[CT], rng: random.Random | None = None) -> None:
    """Quick sort around a random pivot drawn from [left, right)."""
    _quick_sort(items, 0, len(items) - 1, rng or random.Random())


def _quick_sort(items: MutableSequence[CT], left: int, right: int, rng: random.Random) -> None:
    if left < right:
        pivot = _partition(items, left, right, rng.randrange(left, right))
        _quick_sort(items, left, pivot - 1, rng)
        _quick_sort(items, pivot + 1, right, rng)


def _partition(items: MutableSequence[CT], left: int, right: int, pivot_index: int) -> int:
    pivot_value = items[pivot_index]
    _swap(items, pivot_index, right)

    store_index = left
    for i in range(left, right):
        if items[i] < pivot_value:
            _swap(items, i, store_index)
            store_index += 1

    _swap(items, store_index, right)
    return store_index


# =============================================================================
# REPORTS (Pure computations for the shell)
# =============================================================================


INTEGER_TOKEN = re.compile(r"-?[0-9]+")


def parse_values(tokens: Sequence[str]) -> tuple[Any, ...]:
    """
    Parse command-line tokens as integers if every token is one, else keep strings.

    Only plain ASCII digits with an optional leading minus count as integers,
    so "1_000" or " 7" stay strings.

    Pure: Sequence[str] -> tuple
    """
    if all(INTEGER_TOKEN.fullmatch(token) for token in tokens):
        return tuple(int(token) for token in tokens)
    return tuple(tokens)


def orders_for(choice: str) -> tuple[TraversalOrder, ...]:
    """Map an --order choice to traversal orders. Pure: str -> tuple."""
    match choice:
        case "in":
            return (TraversalOrder.IN_ORDER,)
        case "pre":
            return (TraversalOrder.PRE_ORDER,)
        case "post":
            return (TraversalOrder.POST_ORDER,)
        case "iter":
            return (TraversalOrder.IN_ORDER_ITERATIVE,)
        case "all":
            return tuple(TraversalOrder)
        case _:
            raise ValueError(f"unknown traversal order: {choice}")


def traverse(tree: BinarySearchTree[Any], order: TraversalOrder) -> Traversal:
    """Collect the values one traversal visits. Pure: (tree, order) -> Traversal."""
    if order is TraversalOrder.IN_ORDER_ITERATIVE:
        return Traversal(order, tuple(tree.in_order_sequence()))

    visited: list[Any] = []
    walk = {
        TraversalOrder.IN_ORDER: tree.in_order,
        TraversalOrder.PRE_ORDER: tree.pre_order,
        TraversalOrder.POST_ORDER: tree.post_order,
    }[order]
    walk(visited.append)
    return Traversal(order, tuple(visited))


def build_report(
    values: Sequence[Any],
    removals: Sequence[Any],
    orders: Sequence[TraversalOrder],
) -> TreeReport:
    """
    Insert values in order, apply removals in order, and describe the result.

    Pure: (values, removals, orders) -> TreeReport
    """
    tree: BinarySearchTree[Any] = BinarySearchTree(values)
    outcomes = tuple(Removal(value, tree.remove(value)) for value in removals)

    return TreeReport(
        inserted=len(values),
        count=tree.count,
        height=tree.height,
        removals=outcomes,
        traversals=tuple(traverse(tree, order) for order in orders),
    )


# =============================================================================
# RENDERERS (Pure: Data -> str)
# =============================================================================


def render_report_text(report: TreeReport) -> str:
    """Render report as human-readable text. Pure: TreeReport -> str."""
    lines: list[str] = []
    lines.append(f"Inserted {report.inserted} values:")

    for removal in report.removals:
        status = "removed" if removal.removed else "not found"
        lines.append(f"  remove {removal.value!s:20} {status}")

    lines.append(f"\nCount: {report.count}, height: {report.height}")
    for traversal in report.traversals:
        order_str = traversal.order.name.lower().replace("_", " ")
        values_str = " ".join(str(v) for v in traversal.values) or "(empty)"
        lines.append(f"  {order_str:20} {values_str}")

    return "\n".join(lines)


def render_report_json(report: TreeReport) -> str:
    """Render report as JSON. Pure: TreeReport -> str."""
    data = {
        "inserted": report.inserted,
        "count": report.count,
        "height": report.height,
        "removals": [
            {"value": r.value, "removed": r.removed} for r in report.removals
        ],
        "traversals": {
            t.order.name.lower(): list(t.values) for t in report.traversals
        },
    }
    return json.dumps(data, indent=2)


def render_error(message: str) -> str:
    """Render an error message. Pure: str -> str."""
    return f"Error: {message}"


# =============================================================================
# MAIN (Orchestration) - Wiring only, single print at the end
# =============================================================================


def run(
    values: Sequence[str],
    removals: Sequence[str],
    order: str,
    output_format: Literal["text", "json"],
) -> tuple[int, str]:
    """
    Build a tree from command-line tokens. Returns (exit_code, output_to_display).

    Pure apart from logging.
    """
    if not values:
        return (1, render_error("no values given"))

    parsed = parse_values([*values, *removals])
    tree_values, removal_values = parsed[: len(values)], parsed[len(values) :]
    logger.info(
        "Building tree from %d values with %d removals", len(tree_values), len(removal_values)
    )

    report = build_report(tree_values, removal_values, orders_for(order))

    if output_format == "json":
        return (0, render_report_json(report))
    return (0, render_report_text(report))


def main() -> int:
    """Entry point. Parses args, calls run(), prints once, exits."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Build a binary search tree and print its traversals."
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Values to insert, in order (integers if all are plain digits, else strings)",
    )
    parser.add_argument(
        "-r", "--remove",
        nargs="+",
        default=[],
        metavar="VALUE",
        help="Values to remove after inserting, in order",
    )
    parser.add_argument(
        "--order",
        choices=["in", "pre", "post", "iter", "all"],
        default="all",
        help="Traversal order to print (default: all)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log tree operations to stderr",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    exit_code, output = run(
        values=args.values,
        removals=args.remove,
        order=args.order,
        output_format=args.format,
    )

    # Single print at the edge
    print(output)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())

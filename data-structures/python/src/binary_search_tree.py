"""Binary search tree with parent links, bulk balanced construction and
explicit rebalancing.

Insert and delete never rebalance on their own; call ``rebalance()`` when a
balance guarantee is needed. Only the bulk build recurses, and it only ever
runs over sorted input, so its depth is log2 of the size. Every walk over an
existing tree uses an explicit stack and is safe on skewed trees of any size.
"""

from typing import (Callable, Dict, Generic, Iterable, Iterator, List, Optional, Sequence,
                    Tuple, TypeVar)

from linked_queue import LinkedQueue
from merge_sort import merge_sort, unique_sorted

T = TypeVar('T')


class EmptySubtreeError(ValueError):
    """Raised when an operation that needs a node is given ``None``."""


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, value: T, parent: Optional['BinarySearchTree.Node'] = None) -> None:
            self.value: T = value
            self.parent: Optional['BinarySearchTree.Node'] = parent
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0
        self._load(unique_sorted(merge_sort(list(values))))

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def _load(self, ordered: Sequence[T]) -> None:
        self._root = self._build(ordered, 0, len(ordered) - 1, None)
        self._size = len(ordered)

    def _build(self, ordered: Sequence[T], start: int, end: int,
               parent: Optional[Node]) -> Optional[Node]:
        if start > end:
            return None
        mid = (start + end) // 2
        node = BinarySearchTree.Node(ordered[mid], parent)
        node.left = self._build(ordered, start, mid - 1, node)
        node.right = self._build(ordered, mid + 1, end, node)
        return node

    def find(self, value: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def find_min(self, node: Optional[Node]) -> Node:
        if node is None:
            raise EmptySubtreeError("find_min of empty subtree")
        while node.left is not None:
            node = node.left
        return node

    def find_max(self, node: Optional[Node]) -> Node:
        if node is None:
            raise EmptySubtreeError("find_max of empty subtree")
        while node.right is not None:
            node = node.right
        return node

    def contains(self, value: T) -> bool:
        return self.find(value) is not None

    def min(self) -> T:
        if self._root is None:
            raise EmptySubtreeError("min from empty tree")
        return self.find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise EmptySubtreeError("max from empty tree")
        return self.find_max(self._root).value

    def insert(self, value: T) -> bool:
        """Add ``value`` as a new leaf. Returns False if it is already present."""
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
            return True

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value, node)
                    self._size += 1
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value, node)
                    self._size += 1
                    return True
                node = node.right
            else:
                return False

    def delete(self, value: T) -> bool:
        """Remove ``value`` from the tree. Returns False if it was not found.

        A node with two children is replaced by its in-order successor node,
        which is unlinked from its old position and takes over the deleted
        node's parent and children.
        """
        node = self.find(value)
        if node is None:
            return False

        if node.left is None:
            self._replace_child(node.parent, node, node.right)
        elif node.right is None:
            self._replace_child(node.parent, node, node.left)
        else:
            successor = self.find_min(node.right)
            if successor.parent is not node:
                self._replace_child(successor.parent, successor, successor.right)
                successor.right = node.right
                successor.right.parent = successor
            self._replace_child(node.parent, node, successor)
            successor.left = node.left
            successor.left.parent = successor

        node.parent = node.left = node.right = None
        self._size -= 1
        return True

    def _replace_child(self, parent: Optional[Node], old: Node,
                       new: Optional[Node]) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def pre_order(self, callback: Optional[Callable[[T], object]] = None) -> list:
        """Visit node, then left subtree, then right subtree.

        Returns the visited values. With ``callback``, calls it on each value in
        visitation order once the walk is done and returns its results instead.
        """
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return self._apply(result, callback)

    def in_order(self, callback: Optional[Callable[[T], object]] = None) -> list:
        """Left, node, right: sorted values, or callback results in that order."""
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return self._apply(result, callback)

    def post_order(self, callback: Optional[Callable[[T], object]] = None) -> list:
        """Left, right, node: values, or callback results in that order."""
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return self._apply(result, callback)

    def level_order(self, callback: Optional[Callable[[T], object]] = None) -> list:
        """Breadth first, left to right: values, or callback results in that order."""
        result: List[T] = []
        if self._root is None:
            return result
        queue = LinkedQueue()
        queue.enqueue(self._root)
        while not queue.is_empty():
            node = queue.dequeue()
            result.append(node.value)
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)
        return self._apply(result, callback)

    @staticmethod
    def _apply(values: List[T], callback: Optional[Callable[[T], object]]) -> list:
        if callback is None:
            return values
        return [callback(value) for value in values]

    def height(self, node: Optional[Node]) -> int:
        height = self._walk_heights(node, check_balance=False)
        assert height is not None
        return height

    def tree_height(self) -> int:
        return self.height(self._root)

    def depth(self, node: Optional[Node]) -> int:
        if node is None:
            raise EmptySubtreeError("depth of empty subtree")
        count = 0
        while node.parent is not None:
            node = node.parent
            count += 1
        return count

    # Post-order walk with an explicit stack. With check_balance, returns None
    # as soon as some node's child heights differ by more than one.
    def _walk_heights(self, node: Optional[Node], check_balance: bool) -> Optional[int]:
        if node is None:
            return -1
        heights: Dict[BinarySearchTree.Node, int] = {}
        stack: List[Tuple[BinarySearchTree.Node, bool]] = [(node, False)]
        while stack:
            current, children_done = stack.pop()
            if not children_done:
                stack.append((current, True))
                if current.right is not None:
                    stack.append((current.right, False))
                if current.left is not None:
                    stack.append((current.left, False))
                continue
            left = -1 if current.left is None else heights.pop(current.left)
            right = -1 if current.right is None else heights.pop(current.right)
            if check_balance and abs(left - right) > 1:
                return None
            heights[current] = 1 + max(left, right)
        return heights[node]

    def is_balanced(self) -> bool:
        return self._walk_heights(self._root, check_balance=True) is not None

    def rebalance(self) -> bool:
        """Rebuild the tree from its sorted values if it is unbalanced.

        Returns True when a rebuild happened.
        """
        if self.is_balanced():
            return False
        self._load(self.in_order())
        return True

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def copy(self) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = BinarySearchTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def pretty_print(self) -> str:
        lines: List[str] = []
        if self._root is None:
            return ""
        # Right subtree above its node, left subtree below. Each entry is either
        # a finished line (str) or a (node, prefix, is_left) frame to expand.
        stack: list = [(self._root, "", True)]
        while stack:
            entry = stack.pop()
            if isinstance(entry, str):
                lines.append(entry)
                continue
            node, prefix, is_left = entry
            if node.left is not None:
                stack.append((node.left, prefix + ("    " if is_left else "│   "), True))
            stack.append(prefix + ("└── " if is_left else "┌── ") + str(node.value))
            if node.right is not None:
                stack.append((node.right, prefix + ("│   " if is_left else "    "), False))
        return "\n".join(lines)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size}, height={self.tree_height()})"

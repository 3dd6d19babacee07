"""
Balanced Search Tree - recursive AVL tree built from owned node slots.

Every position in the tree is a TreeNode slot that is either empty or holds
an Occupied record (value, left slot, right slot). Insertion recurses down to
an empty slot and, on the way back up, rebalances any node whose subtrees
differ in height by more than one. Rotations move records between slots
(take, rebuild, overwrite) and never copy a node.

Heights are not stored; they are recomputed from the children on demand.
"""

from typing import TypeVar, Generic, Iterable, List, Iterator, Optional

T = TypeVar('T')

_UNBOUNDED = object()


class TreeNode(Generic[T]):
    class Occupied:
        def __init__(self, value: T, left: 'TreeNode', right: 'TreeNode') -> None:
            self.value: T = value
            self.left: TreeNode = left
            self.right: TreeNode = right

    def __init__(self) -> None:
        self._node: Optional[TreeNode.Occupied] = None

    @classmethod
    def node(cls, value: T, left: 'TreeNode[T]', right: 'TreeNode[T]') -> 'TreeNode[T]':
        """Build an occupied slot that takes ownership of ``left`` and ``right``."""
        tree: TreeNode[T] = cls()
        tree._node = TreeNode.Occupied(value, left, right)
        return tree

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> 'TreeNode[T]':
        """Insert ``values`` in order into a new tree. Duplicates are dropped."""
        tree: TreeNode[T] = cls()
        for value in values:
            tree.insert(value)
        return tree

    def _take(self) -> Optional[Occupied]:
        # Moves the record out and leaves this slot empty.
        node = self._node
        self._node = None
        return node

    def is_empty(self) -> bool:
        return self._node is None

    @property
    def value(self) -> T:
        if self._node is None:
            raise ValueError("value of empty tree")
        return self._node.value

    @property
    def left(self) -> 'TreeNode[T]':
        if self._node is None:
            raise ValueError("left of empty tree")
        return self._node.left

    @property
    def right(self) -> 'TreeNode[T]':
        if self._node is None:
            raise ValueError("right of empty tree")
        return self._node.right

    def height(self) -> int:
        if self._node is None:
            return 0
        return 1 + max(self._node.left.height(), self._node.right.height())

    def _is_bst(self, low: object = _UNBOUNDED, high: object = _UNBOUNDED) -> bool:
        """Check ordering against the open interval (low, high) inherited from ancestors."""
        node = self._node
        if node is None:
            return True
        if low is not _UNBOUNDED and not low < node.value:
            return False
        if high is not _UNBOUNDED and not node.value < high:
            return False
        return node.left._is_bst(low, node.value) and node.right._is_bst(node.value, high)

    def is_balanced(self) -> bool:
        node = self._node
        if node is None:
            return True
        if abs(node.left.height() - node.right.height()) > 1:
            return False
        return node.left.is_balanced() and node.right.is_balanced()

    def validate(self) -> bool:
        return self._is_bst() and self.is_balanced()

    def _balance_factor(self) -> int:
        if self._node is None:
            return 0
        return self._node.left.height() - self._node.right.height()

    def insert(self, value: T) -> None:
        node = self._node
        if node is None:
            self._node = TreeNode.Occupied(value, TreeNode(), TreeNode())
            return

        if value < node.value:
            node.left.insert(value)
        elif value > node.value:
            node.right.insert(value)
        else:
            return

        if not self.is_balanced():
            self._rebalance()

    def left_rotate(self) -> None:
        """
        Promote the right child into this slot.

            (v, L, (r, RL, RR))  ->  (r, (v, L, RL), RR)

        No-op when this slot or its right child is empty.
        """
        node = self._node
        if node is None or node.right.is_empty():
            return
        pivot = node.right._take()
        node.left = TreeNode.node(node.value, node.left, pivot.left)
        node.value = pivot.value
        node.right = pivot.right

    def right_rotate(self) -> None:
        """
        Promote the left child into this slot.

            (v, (l, LL, LR), R)  ->  (l, LL, (v, LR, R))

        No-op when this slot or its left child is empty.
        """
        node = self._node
        if node is None or node.left.is_empty():
            return
        pivot = node.left._take()
        node.right = TreeNode.node(node.value, pivot.right, node.right)
        node.value = pivot.value
        node.left = pivot.left

    def _rebalance(self) -> None:
        factor = self._balance_factor()
        if factor > 1:
            # Left-right shape is straightened into left-left first.
            if self.left._balance_factor() < 0:
                self.left.left_rotate()
            self.right_rotate()
        elif factor < -1:
            if self.right._balance_factor() > 0:
                self.right.right_rotate()
            self.left_rotate()

    def contains(self, value: T) -> bool:
        node = self._node
        while node is not None:
            if value < node.value:
                node = node.left._node
            elif value > node.value:
                node = node.right._node
            else:
                return True
        return False

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[TreeNode.Occupied] = []
        node = self._node
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left._node
            node = stack.pop()
            result.append(node.value)
            node = node.right._node
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._node is None:
            return result
        stack: List[TreeNode.Occupied] = [self._node]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right._node is not None:
                stack.append(node.right._node)
            if node.left._node is not None:
                stack.append(node.left._node)
        return result

    def copy(self) -> 'TreeNode[T]':
        """Structural copy: same shape, new slots, values shared."""
        if self._node is None:
            return TreeNode()
        return TreeNode.node(self._node.value, self._node.left.copy(), self._node.right.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        mine, theirs = self._node, other._node
        if mine is None or theirs is None:
            return mine is None and theirs is None
        return mine.value == theirs.value and mine.left == theirs.left and mine.right == theirs.right

    __hash__ = None

    def __len__(self) -> int:
        return len(self.in_order())

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        if self._node is None:
            return "TreeNode()"
        return f"TreeNode.node({self._node.value!r}, {self._node.left!r}, {self._node.right!r})"

    def __str__(self) -> str:
        return f"TreeNode(size={len(self)}, height={self.height()})"

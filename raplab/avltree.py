"""A self-balancing binary search tree with ordered neighbour queries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

K = TypeVar("K")


@dataclass
class AVLNode:
    """A tree node; ``id`` refers to the key stored in the owning tree."""

    id: int = -1
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    h: int = 0

    def __str__(self) -> str:
        return (
            f"AVLNode(id:{self.id},hasLeft:{int(self.left is not None)},"
            f"hasRight:{int(self.right is not None)},h:{self.h})"
        )


def height(n: Optional[AVLNode]) -> int:
    """Height of a node; an empty subtree has height 0."""
    return 0 if n is None else n.h


def _update_height(n: AVLNode) -> None:
    n.h = max(height(n.left), height(n.right)) + 1


def right_rotate(y: AVLNode) -> AVLNode:
    """Rotate ``y`` to the right and return the new subtree root."""
    x = y.left
    if x is None:
        raise ValueError("right rotation needs a left child")
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def left_rotate(x: AVLNode) -> AVLNode:
    """Rotate ``x`` to the left and return the new subtree root."""
    y = x.right
    if y is None:
        raise ValueError("left rotation needs a right child")
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def balance_factor(n: Optional[AVLNode]) -> int:
    """Left height minus right height; 0 for an empty subtree."""
    if n is None:
        return 0
    return height(n.left) - height(n.right)


class AVLTree(Generic[K]):
    """AVL tree of unique keys, each tagged with an integer id."""

    def __init__(self) -> None:
        self._key: dict[int, Any] = {}
        self._root: Optional[AVLNode] = None
        self._id_gen = 0
        self._size = 0

    # ----- public API -----

    def add(self, k: K, id: int = -1) -> None:
        """Insert ``k``; a negative ``id`` means one is generated. Duplicates are ignored."""
        self._root = self._insert(self._root, k, id)

    def find(self, k: K) -> Optional[AVLNode]:
        """A copy of the node holding ``k``, or None when ``k`` is absent."""
        node = self._find(self._root, k)
        return None if node is None else replace(node)

    def __contains__(self, k: object) -> bool:
        return self._find(self._root, k) is not None

    def find_max_less(self, k: K, if_equal: bool = False) -> Optional[tuple[K, int]]:
        """Largest key below ``k`` (or equal to it when ``if_equal``) and its id."""
        ref = self._find_max_less(self._root, k, if_equal, -1)
        return None if ref < 0 else (self._key[ref], ref)

    def find_min_more(self, k: K, if_equal: bool = False) -> Optional[tuple[K, int]]:
        """Smallest key above ``k`` (or equal to it when ``if_equal``) and its id."""
        ref = self._find_min_more(self._root, k, if_equal, -1)
        return None if ref < 0 else (self._key[ref], ref)

    def delete(self, k: K) -> None:
        """Remove ``k`` from the tree; nothing happens when it is absent."""
        target = self._find(self._root, k)
        if target is None:
            return
        removed_id = target.id
        self._root = self._delete(self._root, k)
        self._key.pop(removed_id, None)
        self._size -= 1

    def clear(self) -> None:
        """Remove everything and reset the id generator."""
        self._key.clear()
        self._root = None
        self._id_gen = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        for key, _ in self._in_order(self._root, frozenset()):
            yield key

    def to_sorted(self, skip_set: Optional[Iterable[int]] = None) -> list[tuple[K, int]]:
        """All ``(key, id)`` pairs in ascending key order, leaving out ids in ``skip_set``."""
        skip = frozenset(skip_set) if skip_set is not None else frozenset()
        return list(self._in_order(self._root, skip))

    def verify(self) -> None:
        """Check ordering, heights and balance everywhere; raise RuntimeError on a fault."""
        self._verify(self._root)

    def __str__(self) -> str:
        return "AVL-tree:{" + "".join(self._pre_order(self._root)) + "}"

    # ----- internals -----

    def _next_id(self) -> int:
        out = self._id_gen
        self._id_gen += 1
        return out

    def _pre_order(self, n: Optional[AVLNode]) -> Iterator[str]:
        if n is None:
            return
        yield f"[k:{self._key[n.id]},h:{n.h},id:{n.id}],"
        yield from self._pre_order(n.left)
        yield from self._pre_order(n.right)

    def _in_order(
        self, n: Optional[AVLNode], skip: frozenset
    ) -> Iterator[tuple[Any, int]]:
        if n is None:
            return
        yield from self._in_order(n.left, skip)
        if n.id not in skip:
            yield self._key[n.id], n.id
        yield from self._in_order(n.right, skip)

    def _find(self, n: Optional[AVLNode], k: Any) -> Optional[AVLNode]:
        while n is not None:
            key = self._key[n.id]
            if k < key:
                n = n.left
            elif k > key:
                n = n.right
            else:
                return n
        return None

    def _find_max_less(self, n: Optional[AVLNode], k: Any, if_equal: bool, ref: int) -> int:
        while n is not None:
            key = self._key[n.id]
            if key < k:
                if ref == -1 or key > self._key[ref]:
                    ref = n.id
                n = n.right
            elif key > k:
                n = n.left
            elif if_equal:
                return n.id
            else:
                n = n.left
        return ref

    def _find_min_more(self, n: Optional[AVLNode], k: Any, if_equal: bool, ref: int) -> int:
        while n is not None:
            key = self._key[n.id]
            if key > k:
                if ref == -1 or key < self._key[ref]:
                    ref = n.id
                n = n.left
            elif key < k:
                n = n.right
            elif if_equal:
                return n.id
            else:
                n = n.right
        return ref

    def _insert(self, n: Optional[AVLNode], k: Any, id0: int) -> AVLNode:
        if n is None:
            nid = id0 if id0 >= 0 else self._next_id()
            self._key[nid] = k
            self._size += 1
            return AVLNode(id=nid, h=1)

        key = self._key[n.id]
        if k < key:
            n.left = self._insert(n.left, k, id0)
        elif k > key:
            n.right = self._insert(n.right, k, id0)
        else:
            return n

        _update_height(n)
        b = balance_factor(n)
        if b > 1 and n.left is not None and k < self._key[n.left.id]:
            return right_rotate(n)
        if b < -1 and n.right is not None and k > self._key[n.right.id]:
            return left_rotate(n)
        if b > 1 and n.left is not None and k > self._key[n.left.id]:
            n.left = left_rotate(n.left)
            return right_rotate(n)
        if b < -1 and n.right is not None and k < self._key[n.right.id]:
            n.right = right_rotate(n.right)
            return left_rotate(n)
        return n

    @staticmethod
    def _find_min(n: AVLNode) -> AVLNode:
        while n.left is not None:
            n = n.left
        return n

    def _delete(self, n: Optional[AVLNode], k: Any) -> Optional[AVLNode]:
        if n is None:
            return None
        key = self._key[n.id]
        if k < key:
            n.left = self._delete(n.left, k)
        elif k > key:
            n.right = self._delete(n.right, k)
        elif n.left is None or n.right is None:
            child = n.left if n.left is not None else n.right
            if child is None:
                return None
            n = child
        else:
            succ = self._find_min(n.right)
            n.id = succ.id
            n.right = self._delete(n.right, self._key[succ.id])

        _update_height(n)
        b = balance_factor(n)
        if b > 1 and balance_factor(n.left) >= 0:
            return right_rotate(n)
        if b > 1 and balance_factor(n.left) < 0:
            n.left = left_rotate(n.left)
            return right_rotate(n)
        if b < -1 and balance_factor(n.right) <= 0:
            return left_rotate(n)
        if b < -1 and balance_factor(n.right) > 0:
            n.right = right_rotate(n.right)
            return left_rotate(n)
        return n

    def _verify(self, n: Optional[AVLNode]) -> None:
        if n is None:
            return
        key = self._key[n.id]
        if (n.left is not None and not self._key[n.left.id] < key) or (
            n.right is not None and not self._key[n.right.id] > key
        ):
            raise RuntimeError(f"AVL-tree is not a binary search tree at {n}")
        if n.h != max(height(n.left), height(n.right)) + 1:
            raise RuntimeError(f"AVL-tree has a stale height at {n}")
        if not -1 <= balance_factor(n) <= 1:
            raise RuntimeError(f"AVL-tree is not balanced at {n}")
        self._verify(n.left)
        self._verify(n.right)
"""Self-balancing binary search tree of samples keyed by id."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .records import PathLike, Sample, next_id, read_samples, write_samples


class _Node:
    __slots__ = ("sample", "left", "right", "height")

    def __init__(self, sample: Sample) -> None:
        self.sample = sample
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(top: _Node) -> _Node:
    pivot = top.left
    top.left = pivot.right
    pivot.right = top
    _update(top)
    _update(pivot)
    return pivot


def _rotate_left(top: _Node) -> _Node:
    pivot = top.right
    top.right = pivot.left
    pivot.left = top
    _update(top)
    _update(pivot)
    return pivot


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class AVLTree:
    """Samples in an AVL tree; a sample whose id is already present is ignored."""

    def __init__(self, samples: Iterable[Sample] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for sample in samples:
            self.insert(sample)

    def insert(self, sample: Sample) -> None:
        self._root = self._insert(self._root, sample)

    def _insert(self, node: Optional[_Node], sample: Sample) -> _Node:
        if node is None:
            self._size += 1
            return _Node(sample)
        key = sample.id
        if key < node.sample.id:
            node.left = self._insert(node.left, sample)
        elif key > node.sample.id:
            node.right = self._insert(node.right, sample)
        else:
            return node

        _update(node)
        balance = _balance(node)
        if balance > 1 and key < node.left.sample.id:
            return _rotate_right(node)
        if balance < -1 and key > node.right.sample.id:
            return _rotate_left(node)
        if balance > 1 and key > node.left.sample.id:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and key < node.right.sample.id:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def find(self, sample_id: int) -> Optional[Sample]:
        node = self._root
        while node is not None:
            if node.sample.id == sample_id:
                return node.sample
            node = node.left if sample_id < node.sample.id else node.right
        return None

    def find_limited(self, sample_id: int, limit: int) -> Optional[Sample]:
        """Search visiting at most limit nodes; None if not reached in time."""
        node = self._root
        accesses = 0
        while node is not None and accesses < limit:
            if node.sample.id == sample_id:
                return node.sample
            node = node.left if sample_id < node.sample.id else node.right
            accesses += 1
        return None

    def remove(self, sample_id: int) -> Sample:
        """Remove the sample with this id and return it; KeyError if absent."""
        removed = self.find(sample_id)
        if removed is None:
            raise KeyError(sample_id)
        self._root = self._remove(self._root, sample_id)
        self._size -= 1
        return removed

    def _remove(self, node: Optional[_Node], sample_id: int) -> Optional[_Node]:
        if node is None:
            return None
        if sample_id < node.sample.id:
            node.left = self._remove(node.left, sample_id)
        elif sample_id > node.sample.id:
            node.right = self._remove(node.right, sample_id)
        elif node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        else:
            successor = _min_node(node.right)
            node.sample = successor.sample
            node.right = self._remove(node.right, successor.sample.id)

        _update(node)
        balance = _balance(node)
        if balance > 1:
            if _balance(node.left) < 0:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1:
            if _balance(node.right) > 0:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    @staticmethod
    def _inorder(node: Optional[_Node]) -> Iterator[Sample]:
        if node is None:
            return
        yield from AVLTree._inorder(node.left)
        yield node.sample
        yield from AVLTree._inorder(node.right)

    @staticmethod
    def _preorder(node: Optional[_Node]) -> Iterator[Sample]:
        if node is None:
            return
        yield node.sample
        yield from AVLTree._preorder(node.left)
        yield from AVLTree._preorder(node.right)

    def __iter__(self) -> Iterator[Sample]:
        """Samples in ascending id order."""
        return self._inorder(self._root)

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self._root)

    def preorder_ids(self) -> list[int]:
        """Ids visiting each node before its left and then right subtree."""
        return [sample.id for sample in self._preorder(self._root)]

    def next_id(self) -> int:
        return next_id(self)

    def filter(
        self,
        year_min: int,
        year_max: int,
        state: Optional[str] = None,
        crop: Optional[str] = None,
    ) -> list[Sample]:
        """Matching samples, in pre-order."""
        return [
            sample
            for sample in self._preorder(self._root)
            if sample.matches(year_min, year_max, state, crop)
        ]

    @classmethod
    def load(cls, path: PathLike) -> "AVLTree":
        return cls(read_samples(path))

    def save(self, path: PathLike) -> None:
        write_samples(path, self)
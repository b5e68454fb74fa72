import math
import random

import pytest

from agrobench.avl import AVLTree
from agrobench.records import Sample, read_samples


def make(sample_id, year=2020, state="SP", crop="Soja"):
    return Sample(sample_id, year, state, crop, 1.5, 2.0, 3.0, 4.0, 5.0)


def test_inorder_is_sorted():
    ids = list(range(1, 51))
    random.Random(7).shuffle(ids)
    tree = AVLTree(make(i) for i in ids)
    assert [s.id for s in tree] == sorted(ids)
    assert len(tree) == 50


def test_rotation_on_ascending_three():
    tree = AVLTree(make(i) for i in (1, 2, 3))
    assert tree.preorder_ids() == [2, 1, 3]
    assert tree.height() == 2


def test_height_stays_logarithmic():
    tree = AVLTree(make(i) for i in range(1, 1025))
    assert tree.height() <= 1.45 * math.log2(1025) + 1


def test_duplicate_is_ignored():
    tree = AVLTree([make(5, year=2000), make(5, year=2010)])
    assert len(tree) == 1
    assert tree.find(5).year == 2000


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.next_id() == 1
    assert list(tree) == []
    assert tree.find(1) is None


def test_remove_returns_sample_and_keeps_order():
    ids = list(range(1, 101))
    tree = AVLTree(make(i) for i in ids)
    rng = random.Random(3)
    to_remove = rng.sample(ids, 60)
    for i in to_remove:
        assert tree.remove(i).id == i
    left = sorted(set(ids) - set(to_remove))
    assert [s.id for s in tree] == left
    assert len(tree) == len(left)
    assert tree.height() <= 1.45 * math.log2(len(left) + 1) + 1
    for i in to_remove:
        assert tree.find(i) is None


def test_remove_missing_raises():
    tree = AVLTree([make(1)])
    with pytest.raises(KeyError):
        tree.remove(2)
    assert len(tree) == 1


def test_remove_node_with_two_children():
    tree = AVLTree(make(i) for i in (1, 2, 3))
    assert tree.remove(2).id == 2
    assert [s.id for s in tree] == [1, 3]


def test_find_limited():
    tree = AVLTree(make(i) for i in range(1, 16))
    assert tree.find_limited(8, 0) is None
    assert tree.find_limited(tree.preorder_ids()[0], 1).id == tree.preorder_ids()[0]
    assert tree.find_limited(15, tree.height()).id == 15
    assert tree.find_limited(99, 100) is None


def test_next_id():
    tree = AVLTree(make(i) for i in (4, 9, 2))
    assert tree.next_id() == 10


def test_filter():
    tree = AVLTree(
        [
            make(1, 2010, "SP", "Soja"),
            make(2, 2015, "mg", "Milho"),
            make(3, 2020, "MG", "milho"),
        ]
    )
    assert {s.id for s in tree.filter(2000, 2030, "MG", None)} == {2, 3}
    assert {s.id for s in tree.filter(2012, 2030, None, "MILHO")} == {2, 3}
    assert {s.id for s in tree.filter(2000, 2012, "", "")} == {1}
    assert tree.filter(2021, 2030) == []


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "data.csv"
    samples = [make(i, 2000 + i) for i in (3, 1, 2)]
    AVLTree(samples).save(path)
    assert [s.id for s in read_samples(path)] == [1, 2, 3]
    loaded = AVLTree.load(path)
    assert list(loaded) == sorted(samples, key=lambda s: s.id)
import pytest

from agrobench.linked_list import LinkedList
from agrobench.records import Sample, read_samples, write_samples


def make(sample_id, year=2020, state="SP", crop="Soja"):
    return Sample(sample_id, year, state, crop, 1.5, 2.25, 3.0, 4.0, 5.0)


def test_insert_puts_newest_first():
    chain = LinkedList([make(1), make(2), make(3)])
    assert [s.id for s in chain] == [3, 2, 1]
    assert len(chain) == 3


def test_empty_list():
    chain = LinkedList()
    assert list(chain) == []
    assert len(chain) == 0
    assert chain.next_id() == 1
    assert chain.find(1) is None


def test_find():
    chain = LinkedList([make(1), make(2)])
    assert chain.find(2) == make(2)
    assert chain.find(9) is None


def test_find_limited():
    chain = LinkedList([make(1), make(2), make(3)])
    assert chain.find_limited(1, 3) == make(1)
    assert chain.find_limited(1, 2) is None
    assert chain.find_limited(3, 1) == make(3)
    assert chain.find_limited(3, 0) is None


@pytest.mark.parametrize("victim", [1, 2, 3])
def test_remove_anywhere(victim):
    chain = LinkedList([make(1), make(2), make(3)])
    assert chain.remove(victim) == make(victim)
    assert victim not in [s.id for s in chain]
    assert len(chain) == 2


def test_remove_missing_raises():
    chain = LinkedList([make(1)])
    with pytest.raises(KeyError):
        chain.remove(5)
    assert len(chain) == 1
    with pytest.raises(KeyError):
        LinkedList().remove(1)


def test_next_id():
    chain = LinkedList([make(4), make(11), make(2)])
    assert chain.next_id() == 12


def test_filter():
    chain = LinkedList(
        [make(1, 2000, "SP", "Soja"), make(2, 2005, "MG", "Cafe"), make(3, 2010, "sp", "soja")]
    )
    assert [s.id for s in chain.filter(2000, 2010, "SP", "SOJA")] == [3, 1]
    assert [s.id for s in chain.filter(2001, 2009)] == [2]
    assert chain.filter(1900, 1950) == []


def test_load_reverses_file_order(tmp_path):
    path = tmp_path / "data.csv"
    samples = [make(1), make(2), make(3)]
    write_samples(path, samples)
    chain = LinkedList.load(path)
    assert list(chain) == samples[::-1]


def test_save_writes_iteration_order(tmp_path):
    path = tmp_path / "out.csv"
    chain = LinkedList([make(5), make(6)])
    chain.save(path)
    assert read_samples(path) == list(chain)
    assert list(LinkedList.load(path)) == [make(5), make(6)]
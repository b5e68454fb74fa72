# agrobench

Agricultural sample records (year, state, crop, price per tonne, yield,
production, planted area and total crop value) held in several classic data
structures, so the same dataset can be loaded, queried, edited and saved with
any of them:

- `agrobench.linked_list.LinkedList`: unordered singly linked list, new records at the head
- `agrobench.sorted_list.SortedList`: records kept in ascending id order
- `agrobench.avl.AVLTree`: self-balancing binary search tree keyed by id
- `agrobench.hash_table.HashTable`: separate-chaining table with 2011 buckets
- `agrobench.skiplist.SkipList`: probabilistic ordered list with up to 16 levels
- `agrobench.trie.Trie`: prefix index over state or crop names

## Dataset format

A text file with one header line followed by semicolon-separated rows:

```
ID;Data;Localizacao;Tipo de plantio;Preco por tonelada (Dolares/tonelada);Rendimento (kilogramas por hectare);Producao (toneladas);Area plantada (hectares);Valor total da safra (Dolares)
1;2019;SP;Soja;350.00;3200.00;1500.00;468.75;525000.00
2;2020;MT;Milho;180.50;5800.00;9000.00;1551.72;1624500.00
```

`agrobench.records.parse_line` raises `ValueError` for a row with fewer than
nine fields, an empty state or crop, or a number that does not parse. States
are cut to 9 characters and crops to 49; the five measures are stored at
single precision. Saving writes the same header back and formats every
number with two decimal places.

## Working with records

```python
from agrobench.records import read_samples, write_samples, next_id

samples = read_samples("harvest.csv")   # header and blank lines skipped
print(next_id(samples))                 # highest id + 1, or 1 when empty

for sample in samples:
    if sample.matches(2018, 2020, "SP", ""):   # empty or None text means "any"
        print(sample.to_row())                  # fields joined by " | "

write_samples("copy.csv", samples)
```

`Sample` is a frozen dataclass with the fields `id`, `year`, `state`, `crop`,
`price_per_ton`, `crop_yield`, `production`, `planted_area` and
`total_value`; `to_csv()` gives its dataset line.

## The structures

Every structure can be built from an iterable of samples or with `load(path)`,
and offers `insert`, `find` (None when absent), `find_limited(id, limit)`
(gives up after `limit` node visits), `remove` (returns the sample, raises
`KeyError` when absent), `filter(year_min, year_max, state, crop)`, `save`,
iteration and `len()`.

```python
from agrobench.avl import AVLTree
from agrobench.hash_table import HashTable

tree = AVLTree.load("harvest.csv")
print(len(tree), tree.height(), tree.next_id())
record = tree.find(42)
tree.remove(42)
for sample in tree.filter(2015, 2020, "mt", "soja"):  # case-insensitive
    print(sample.to_row())
tree.save("harvest.csv")

table = HashTable.load("harvest.csv")
print(table.find(7))
print(table.buckets()[:3])   # (bucket index, samples front first)
```

Differences between them:

- `LinkedList` iterates newest first; `HashTable` iterates bucket by bucket.
- `SortedList`, `AVLTree` and `SkipList` iterate in ascending id order.
- `AVLTree` ignores a sample whose id is already present; the others keep
  duplicates. `AVLTree.filter` returns matches in pre-order, and
  `preorder_ids()` exposes that order.
- `SortedList` has `max_id()` instead of `next_id()`, and in its `filter`
  only `None` leaves the state or crop open; an empty string must match.
- `SkipList` accepts an `rng` (a `random.Random`) for reproducible levels.

## Prefix search

```python
from agrobench.trie import load_trie

crops = load_trie("harvest.csv", 3)   # column 2 holds states, column 3 crops
print("soja" in crops)
print(crops.words_with_prefix("mi"))
print(crops.words())
```

Trie keys are lower-cased; only the letters a–z and spaces are indexed, and
other characters are skipped.

## Memory benchmark

`agrobench.bench_memory` models storage cost with a fixed byte size per
stored sample for each structure class (`LinkedList`, `SortedList`,
`AVLTree`, `HashTable`, `SkipList`); any other class raises `ValueError`.

```python
from agrobench.avl import AVLTree
from agrobench.skiplist import SkipList
from agrobench.bench_memory import memory_usage, restricted_memory_insertion_time

for structure in (AVLTree, SkipList):
    print(structure.__name__, memory_usage(structure, "harvest.csv", 1000))
    result = restricted_memory_insertion_time(structure, "harvest.csv", 0.05)
    print(result.seconds, result.inserted, result.limit_reached)
```

## What this package does not do

There is no command-line program or interactive menu: everything is used
from Python. Of the benchmarks only the memory ones are provided; there are
no functions here that time insertion, removal or search, nor ones with
simulated delay, latency, data loss or access caps. `find_limited` on each
structure gives the capped search itself, but measuring it is left to the
caller.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.
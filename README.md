# pracollections

Classic data structures and algorithms in plain Python, with no runtime
dependencies.

| Module | Contents |
| --- | --- |
| `pracollections.lists` | `List` interface, `ListArray`, `ListLinked`, `Node` |
| `pracollections.entries` | `TableEntry` key/value pairs and the `Dict` interface |
| `pracollections.hash_table` | `HashTable`: separate chaining over `ListLinked` buckets |
| `pracollections.bstree` | `BSTree` binary search tree and its `BSNode` |
| `pracollections.bstree_dict` | `BSTreeDict`: a `Dict` kept in a `BSTree` of entries |
| `pracollections.simple_tree` | `TreeNode` with free functions `insert`, `delete`, `preorder`, `inorder`, `postorder` |
| `pracollections.searching` | `binary_search`, `exponential_search`, `find_ceil`, `find_floor`, `find_peak`, `smallest_missing`, `count_ones` |
| `pracollections.sorting` | `merge`, `merge_sort`, `interleave`, `partition`, `quick_sort`, `bubble_sort` |
| `pracollections.dynamic` | `max_subarray_sum`, `power`, `min_jumps`, `knapsack`, `min_coins` |
| `pracollections.robot` | `RoboticArm` that moves, grabs and releases |
| `pracollections.pair` | `Pair`, an immutable pair of integers that adds component-wise |
| `pracollections.shortener` | `UrlShortener`: random seven-character keys in an open-addressing table |

## Installation

```
pip install .
```

Python 3.10 or later is required.

## Lists

`ListArray` and `ListLinked` share the `List` interface: `insert(pos, e)`,
`append(e)`, `prepend(e)`, `remove(pos)`, `get(pos)`, `search(e)` (index of
the first equal element, or -1), `empty()`, `size()` and `duplicate_list()`,
which appends a copy of the current contents. Both support `len()`,
indexing and iteration. A position outside the list raises `IndexError`.

```python
from pracollections.lists import ListLinked

items = ListLinked()
items.insert(0, 0)
items.insert(1, 10)
items.prepend(-5)
items.append(14)
print(items.get(0))       # -5
print(items.search(14))   # 3
items.duplicate_list()
print(list(items))        # [-5, 0, 10, 14, -5, 0, 10, 14]
print(items)              # List => [ ... ] with one element per line
```

## Dictionaries

`TableEntry` holds a key and an optional value; entries compare, order and
hash by key alone. `HashTable(size)` and `BSTreeDict()` implement `Dict`:

- `insert(key, value)` raises `ValueError` if the key is already present;
- `search(key)` and `remove(key)` raise `KeyError` if it is missing;
  `remove` returns the removed value;
- `entries()` gives the number of stored entries; `d[key]` is `search(key)`.

`HashTable` also has `capacity()`, the number of buckets, and prints each
bucket in turn. `BSTreeDict` prints its entries in key order.

```python
from pracollections.hash_table import HashTable
from pracollections.bstree_dict import BSTreeDict

table = HashTable(3)
table.insert("One", 1)
table.insert("Two", 2)
print(table.search("One"), table["Two"], table.entries(), table.capacity())

tree_dict = BSTreeDict()
tree_dict.insert("c", 3)
tree_dict.insert("a", 1)
print(tree_dict.remove("c"))   # 3
```

## Binary search trees

`BSTree` keeps unique elements: `insert` raises `ValueError` on a duplicate,
`search` and `remove` raise `KeyError` for a missing element. `size()`,
`len()`, `tree[e]` and in-order iteration are supported; `str(tree)` lists
the elements in ascending order separated by spaces.

```python
from pracollections.bstree import BSTree

tree = BSTree()
for value in (15, 7, 3, 11, 9, 18, 21, 20):
    tree.insert(value)
print(list(tree))   # [3, 7, 9, 11, 15, 18, 20, 21]
tree.remove(15)
```

`pracollections.simple_tree` offers the same idea with bare `TreeNode`
objects: `insert(root, data)` and `delete(root, data)` return the new root,
and `preorder`, `inorder` and `postorder` are generators.

## Searching, sorting and dynamic programming

```python
from pracollections.searching import binary_search, find_ceil
from pracollections.sorting import merge_sort, quick_sort
from pracollections.dynamic import knapsack, min_coins, power

print(binary_search([2, 3, 5, 6, 7, 8, 9], 7))   # 4
print(find_ceil([1, 3, 5], 4))                   # 5 (None when nothing is >= x)
print(merge_sort([38, 27, 43, 3, 9, 82, 10]))    # a new sorted list

values = [5, 1, 4, 2]
quick_sort(values)                               # sorts in place
print(values)                                    # [1, 2, 4, 5]

print(knapsack([1, 2, 3, 8, 7, 4], [20, 5, 10, 40, 15, 25], 10))
print(min_coins([1, 4, 6], 8))                   # 2 (None when impossible)
print(power(2, 6))                               # 64
```

`bubble_sort` and `quick_sort` sort in place; `merge_sort` and `interleave`
return new lists. `interleave` turns `[a1..an, b1..bn]` into
`[a1, b1, ..., an, bn]` and raises `ValueError` for an odd length.

## URL shortener

```python
from pracollections.shortener import UrlShortener

shortener = UrlShortener()          # 100 slots by default
key = shortener.add("https://example.com/a/very/long/path")
print(key, shortener.lookup(key))
print(shortener.remove(key))        # returns the removed URL
```

Keys are seven ASCII letters and digits. `lookup` and `remove` raise
`ValueError` for a malformed key and `KeyError` for an unknown one; `add`
raises `RuntimeError` when the table is full. `load_file(path, output)`
adds every non-blank line of `path`, writes one short link per line to
`output` and returns the new keys. `stored_urls()` yields the stored URLs.

The shortener keeps its table in memory only: nothing is saved between
runs, and it does not serve or redirect short links over the network.

## Commands

```
pracollections-robot [X Y Z]
```
Places a `RoboticArm` at the given coordinates (prompting for them when
none are given), moves it by (3.2, 2.4, 6.7), grabs and prints its state.

```
pracollections-sort [N ...]
```
Bubble-sorts the integers given as arguments; with none, reads a count
followed by that many integers from standard input.

```
pracollections-shortener [--capacity N] [--output FILE]
```
Interactive menu to add URLs, load them from a file (short links are
written to `--output`, default `shortened.txt`), look up, remove, count and
list them.

## Running the tests

```
pip install .[test]
pytest
```
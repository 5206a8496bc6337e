# dsakit

A small collection of classic data structures and algorithms in plain Python.
It needs nothing outside the standard library.

## What is in it

- `dsakit.sorting`
  - `bubble_sort(items)` and `selection_sort(items)` return a new ascending list.
  - `quick_sort(items, compare=None)` returns a new list sorted by an iterative
    quicksort; `compare(a, b)` returns a negative number, zero or a positive
    number, like `strcmp`.
  - `binary_search(items, value)` returns the index of `value` in an ascending
    sequence and raises `ValueError` when it is absent.
- `dsakit.recursion`: `reverse_string`, `ladder` (ways to climb `n` steps taking
  1, 2 or 3 at a time), `num_of_symbols` (total length of several strings),
  `filter_even` and `triangle_numbers` (0 for `n` below 1). They are written
  without deep recursion, so large inputs are fine.
- `dsakit.stack.Stack`: a LIFO stack with `push`, `pop` (raises `IndexError`
  when empty), `len()`, iteration from the top down and `show(file=None)`,
  which prints one element per line.
- `dsakit.queue_fifo.Queue`: a FIFO queue with `enqueue`, `dequeue` (raises
  `IndexError` when empty), `len()`, iteration from front to back and
  `show(file=None)`.
- `dsakit.linked_list`: the `ListNode` dataclass, `build_list(values)`,
  `list_values(head)` and `delete_duplicates(head)`, which unlinks every node
  equal to its predecessor, in place.
- `dsakit.bst.BinarySearchTree`: an unbalanced tree where equal values go
  left. `insert` returns the new `Leaf`, `search` returns a `Leaf` or `None`,
  `delete` returns whether a value was removed, and `clear`, `in`, `len()`,
  in-order iteration and `print_in_order(file=None)` are supported.
- `dsakit.hashtable.HashTable` and `dsakit.hashset.HashSet`: open-addressing
  containers with triangular probing, power-of-two capacities, tombstones for
  deleted slots and growth when used slots would pass 75 % of capacity.
  Hash and equality functions can be supplied; the defaults use `str_hash`
  for strings and `int_hash` for integers. `capacity()`, `used()` and
  `max_used()` report the slot counts.
  - `HashTable` supports `t[key]`, `t[key] = value`, `del t[key]`, `in`,
    `len()`, iteration over keys, `clear()`, `reserve(capacity)` and
    `put(key, value)`, which inserts only when the key is absent and returns
    whether it did.
  - `HashSet` supports `add`, `discard` (both return whether anything changed),
    `in`, `len()`, iteration, `clear()` and `reserve(capacity)`.
  - `dsakit.hashtable` also provides `int_hash`, `str_hash` (the `h * 31 + c`
    scheme over UTF-8 bytes) and `hash_combine`.
- `dsakit.dynvec.DynVec`: a sequence whose capacity starts at 16 and doubles
  when full, with `push`, `reserve`, `resize(size, fill=None)`, `clear`,
  `capacity()`, indexing, `len()` and iteration.
- `dsakit.dynstr.DynStr`: a mutable string that tracks its capacity. It offers
  `append`, `push`, `set`, `resize`, `clear`, `reserve`, `reserve2` (rounds up
  to a power of two), `shrink`, `range(start, count)`, `trim_start`,
  `trim_end`, `trim`, `compare`, `join`, `has_prefix`, `has_suffix`,
  `printf(fmt, *args)` and `DynStr.formatted(fmt, *args)` for `%`-style
  formatting, and compares equal to plain strings with the same text.
- `dsakit.strsplit`: `str_split(text, separator, max_split=0)` returns a list
  of `DynStr`; `join_list(parts, separator, dest=None)` joins them back,
  appending to `dest` when one is given.
- `dsakit.bits.round_up_pow2(value, bits=64)`: round an unsigned integer of
  8, 16, 32 or 64 bits up to the next power of two, wrapping as a fixed-width
  integer would.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.sorting import bubble_sort, binary_search
from dsakit.hashtable import HashTable, str_hash
from dsakit.bst import BinarySearchTree

items = bubble_sort([5, 3, 2, -10])       # [-10, 2, 3, 5]
binary_search(items, 3)                   # 2

table = HashTable(str_hash)
table["Burger"] = 10
print(table["Burger"], len(table))        # 10 1

tree = BinarySearchTree([10, 7, 12, 13, 11])
tree.delete(12)
print(list(tree))                         # [7, 10, 11, 13]
```

## Command line

A short demonstration builds the tree `10, 7, 12, 13, 11`, deletes 12,
searches for 12 and 15, inserts 6, prints the values in order and clears the
tree:

```
dsakit-bst-demo
```

## What it does not do

Every container lives in memory only; nothing is saved to disk or shared
between processes. The binary search tree does no balancing, and none of the
containers is safe to modify from several threads at once.
# linkwise

Singly linked list algorithms, plus a handful of small data structures:
an LRU cache, a text editor with a cursor, a browser history, and
integer hash map and hash set classes.

The package is a library only. It has no command-line program.

## Installation

```
pip install linkwise
```

To run the tests from a source checkout:

```
pip install ".[test]"
python -m pytest
```

## Linked lists

`linkwise.node` provides `ListNode`, a node with `val` and `next`.
Nodes compare by identity. Iterating over a node yields the values from
that node to the end of the list. `from_values(values)` builds a list from
any iterable and returns `None` when it is empty. `to_values(head)` turns a
list back into a Python `list` and gives `[]` for `None`.

```python
from linkwise.node import from_values, to_values
from linkwise.transform import reverse_list, sort_list, reverse_k_group

head = from_values([4, 2, 1, 3])
print(to_values(sort_list(head)))                                   # [1, 2, 3, 4]
print(to_values(reverse_list(from_values([1, 2, 3]))))              # [3, 2, 1]
print(to_values(reverse_k_group(from_values([1, 2, 3, 4, 5]), 2)))  # [2, 1, 4, 3, 5]
```

### `linkwise.transform`

These functions rewire the nodes they are given and return the new head.
`add_two_numbers` builds a new list.

- `add_two_numbers(l1, l2)`: adds two numbers stored as digit lists with
  the least significant digit first.
- `delete_middle(head)`: unlinks the node at index `n // 2`. A list of one
  node gives `None`.
- `merge_two_lists(list1, list2)`: splices two sorted lists together. On
  equal values the node from `list2` comes first.
- `odd_even_list(head)`: puts the nodes at odd positions before those at
  even positions.
- `delete_duplicates(head)`: drops adjacent repeated values from a sorted
  list.
- `remove_nth_from_end(head, n)`: unlinks the `n`-th node from the end,
  where 1 is the last node. Raises `ValueError` if `n` is less than 1 or
  longer than the list.
- `reverse_list(head)`: reverses the list in place.
- `reverse_k_group(head, k)`: reverses each run of `k` nodes and leaves a
  shorter tail as it is. Raises `ValueError` if `k` is less than 1.
- `sort_list(head)`: merge sort by value.

### `linkwise.traversal`

These functions only inspect a list:

- `get_decimal_value(head)`: the list read as binary digits, most
  significant first. An empty list gives 0.
- `get_intersection_node(head_a, head_b)`: the first node that both lists
  share, or `None`.
- `has_cycle(head)`: whether following `next` ever loops.
- `middle_node(head)`: the middle node. For even lengths it is the second
  of the two middle nodes.
- `is_palindrome(head)`: whether the values read the same in both
  directions. The second half is reversed while it is compared and then
  restored, so the list is unchanged afterwards.

### `linkwise.random_list`

`RandomNode` is a node with `val`, `next` and an extra `random` link.
`copy_random_list(head)` makes a deep copy in which the `next` and `random`
links of the copies point at other copies.

## Data structures

```python
from linkwise.lru_cache import LRUCache
from linkwise.text_editor import TextEditor
from linkwise.browser_history import BrowserHistory

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)       # 1
cache.put(3, 3)    # evicts key 2
cache.get(2)       # -1

editor = TextEditor()
editor.add_text("leetcode")
editor.delete_text(4)      # 4
editor.cursor_left(2)      # "le"
editor.text                # "leet"

history = BrowserHistory("home.example.com")
history.visit("a.example.com")
history.back(1)            # "home.example.com"
history.forward(1)         # "a.example.com"
history.current            # "a.example.com"
```

- `LRUCache(capacity)`: `get(key)` returns the value and marks the key as
  recently used, or returns `-1` if the key is absent. `put(key, value)`
  stores the value and evicts the least recently used key when the cache
  is full. A capacity below 1 raises `ValueError`.
- `TextEditor()`: `add_text(text)` inserts at the cursor.
  `delete_text(k)` deletes up to `k` characters left of the cursor and
  returns how many were deleted. `cursor_left(k)` and `cursor_right(k)`
  move the cursor up to `k` places and return the up to ten characters
  left of it. The `text` property holds the whole text.
- `BrowserHistory(homepage)`: `visit(url)` opens a page and clears the
  forward history. `back(steps)` and `forward(steps)` move as far as the
  history allows and return the page reached. The `current` property is
  the page shown.
- `linkwise.hashmap.HashMap`: `put(key, value)`, `get(key)` (returns `-1`
  for a missing key) and `remove(key)`. It is a separate-chaining table of
  integer keys and values.
- `linkwise.hashset.HashSet`: `add(key)`, `remove(key)` and
  `contains(key)`. It is a separate-chaining table of integer keys.

## What it does not do

Everything is held in memory. Nothing is saved to disk, and the classes
are not safe to share between threads without your own locking.
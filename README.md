# dsakit

Small, readable implementations of classic data structures and algorithms
over integers. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## What is inside

### `dsakit.array`

`DynamicArray(size, capacity)` holds `size` zero-filled elements. It raises
`ValueError` if the capacity is smaller than the size. It supports `len()`,
iteration and indexing.

- `set_values(values)` replaces every element. It needs exactly `len(array)`
  values.
- `insert(value, index, override=False, swap_back=False)` shifts the tail right
  by default. With `override` it replaces the element at `index`. With
  `swap_back` it moves the displaced element to the end. When the array is
  full, the capacity grows by ten slots (`resize()`).
- `delete(index, swap_last=False)` removes and returns an element. With
  `swap_last` the last element fills the gap.
- `linear_search(value)` and `binary_search(value)` return an index or `None`.
  Binary search expects ascending order.

### Linked lists

- `dsakit.linked_list.LinkedList` has `append`, `insert(data, index,
  at_begin=False)`, `delete_at(index)`, `delete_key(key)` and
  `reversed_values()`. Inserting at index 0 requires `at_begin=True`.
- `dsakit.doubly_linked_list.DoublyLinkedList` has `append`,
  `insert(data, index, at_begin=False)` and `delete(index)`. It supports
  `reversed()`.
- `dsakit.circular_linked_list.CircularLinkedList` has `insert(data, mode,
  param)` and `delete(mode, param)`. The modes are `InsertMode` (`BEGIN`, `END`,
  `INDEX`, `AFTER_KEY`) and `DeleteMode` (`BEGIN`, `END`, `INDEX`, `KEY`).
  `param` is an index or a key, depending on the mode.

### `dsakit.stacks`

`ArrayStack(capacity)` and `LinkedStack(capacity)` have the following methods:

- `push`, `pop`, `peek`, `is_empty` and `is_full`.
- `ArrayStack` also has `bottom_up()` and `pop_index(index)`, where index 0 is
  the bottom.
- `LinkedStack` also has `bottom()`.

Iteration runs from top to bottom. A full stack raises `StackOverflowError`.
An empty one raises `StackUnderflowError`.

### `dsakit.queues`

- `ArrayQueue(capacity)` is a linear queue. Slots freed by `dequeue` are never
  reused, so it is full once `capacity` items have ever been enqueued.
- `CircularQueue(capacity)` is a ring buffer that reuses freed slots.
- `LinkedQueue()` is unbounded.

A full queue raises `QueueOverflowError`. An empty one raises
`QueueUnderflowError`.

### `dsakit.sorting`

All of these sort a list in place:

- `bubble_sort` sorts ascending and stops early once a pass makes no swap.
- `insertion_sort` sorts in **descending** order.
- `selection_sort` sorts ascending.
- `quick_sort(items, low, high)` sorts the inclusive range `items[low:high + 1]`.
  Its Lomuto `partition` step is public too.

### `dsakit.expressions`

`infix_to_postfix("a+b-c")` returns `"ab+c-"`. Operands are single characters,
and anything that is not `+ - * /` is copied through unchanged. Parentheses are
not treated specially. `precedence` and `is_operator` are also available.

### `dsakit.parentheses`

`is_balanced(expression)` checks curly braces.

`check_braces(expression, capacity=20)` returns the number of matched pairs. It
raises `OverflowError` when nesting exceeds `capacity`. For a stray `}` or an
unclosed `{` it raises `UnbalancedError`, and its `position` attribute marks a
stray `}`.

## Example

```python
from dsakit.stacks import LinkedStack
from dsakit.sorting import bubble_sort
from dsakit.parentheses import is_balanced

stack = LinkedStack(3)
stack.push(10)
stack.push(20)
print(stack.peek())   # 20
print(list(stack))    # [20, 10], from top to bottom

items = [2, 3, 5, 1]
bubble_sort(items)
print(items)          # [1, 2, 3, 5]

print(is_balanced("{{3+2}*{4*{6-9}}}"))  # True
```

## What it does not do

This is a library only. There is no command-line program and no interactive
menu. Conversions other than infix to postfix, such as prefix or infix output,
are not provided.

## Running the tests

```
pip install .[test]
pytest
```
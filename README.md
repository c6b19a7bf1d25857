# chainlab

Linked-list data structures, plus a few small command-line programs built
on top of them. No third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### Singly linked list

`chainlab.singly.SinglyLinkedList` counts positions from 1. Insertions and
deletions at a position outside the list, and deletions from an empty list,
raise `IndexError`. Deletions return the removed value.

```python
from chainlab.singly import SinglyLinkedList

items = SinglyLinkedList([10, 20, 30])
items.insert_at_beginning(5)
items.insert_at_end(40)
items.insert_at(50, 3)      # positions count from 1
items.delete_at_beginning()
items.delete_at_end()
items.delete_at(2)

print(list(items), len(items), 20 in items)
print(items.format())       # values separated by spaces
```

### Doubly linked list

`chainlab.doubly.DoublyLinkedList` supports operations at both ends, reverse
iteration, removal by value (`ValueError` if absent), a search that walks in
from both ends (`find_from_ends`), and two ways of finding the middle element
(`middle` and `middle_from_ends`; with an even count both return the first of
the two middle values). Taking from an empty list raises `EmptyListError`, a
subclass of `IndexError`.

```python
from chainlab.doubly import DoublyLinkedList, EmptyListError

items = DoublyLinkedList([20, 10, 5])
items.push_front(1)
items.push_back(25)
items.pop_front()
items.pop_back()
print(items.peek_front(), list(reversed(items)))
print(items.middle(), items.middle_from_ends())
```

### Stack and queue

`chainlab.stack.Stack` iterates from top to bottom and also has `middle()`.
`chainlab.linkedqueue.Queue` iterates from front to back. Popping, peeking or
dequeuing when empty raises `EmptyListError`.

```python
from chainlab.stack import Stack
from chainlab.linkedqueue import Queue

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.peek(), stack.pop(), stack.is_empty())

queue = Queue()
queue.enqueue(10)
queue.enqueue(20)
print(queue.dequeue(), list(queue))
```

### Josephus elimination

Players `1..n` stand in a circle and every `k`-th player is removed until one
is left. `eliminate` yields, for each round, the removed player and the
players still in the circle; `n` and `k` must be at least 1.

```python
from chainlab.josephus import eliminate, survivor

print(survivor(5, 2))   # 3
for removed, remaining in eliminate(5, 2):
    print(removed, remaining)
```

### Congo line, playlist and treasure hunt

- `chainlab.congo.CongoLine`: people `join` at the back and `leave` from the
  front; `format()` gives the names separated by spaces.
- `chainlab.playlist.Playlist`: `add` puts a song at the front, `remove`
  deletes it by title (`EmptyListError` on an empty playlist, `ValueError` if
  the title is missing), `search` returns whether it is present, and
  `format()` gives `a->b->NULL` or `No songs in playList`.
- `chainlab.treasure.TreasureHunt`: a list of `Clue`s answered in order, with
  three tries per clue. `play(answers)` yields the lines of the game, stopping
  early if the answers run out or a clue's chances are used up;
  `default_hunt()` builds the standard five clues.

```python
from chainlab.treasure import default_hunt

for line in default_hunt().play([2, 6, 9, 0, 7]):
    print(line)         # each clue, then "Won the treasure :)"
```

## Commands

```
chainlab-singly           # walk through singly linked list operations
chainlab-singly search    # read n, n integers and a value from stdin; print Found / Not Found
chainlab-stack            # walk through stack operations
chainlab-queue            # walk through queue operations
chainlab-josephus N K     # print each round and the survivor (reads N K from stdin if omitted)
chainlab-congo            # interactive congo line menu
chainlab-playlist         # interactive playlist menu
chainlab-treasure         # play the treasure hunt, answers read from stdin
```

## What it does not do

The structures live in memory only: nothing is saved between runs, and the
interactive menus start from an empty line or playlist each time.
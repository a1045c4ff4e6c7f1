# structkit

structkit is a collection of classic data structures, algorithms and small
simulations in plain Python. It needs nothing beyond the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `structkit.sorting` | `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort` and `heap_sort`, each returning a new sorted list; `k_way_merge` merges already sorted iterables (text items such as file lines are parsed as integers) |
| `structkit.conversions` | `parse_int` and `format_int` with a base, `find_substring`, `swap_endianness` for 32-bit values, `is_little_endian`, and `BitArray`, a fixed-size bit set packed into 32-bit words |
| `structkit.bst` | `BinarySearchTree` of `BSTNode`s that allows duplicates, with `insert`, `search`, `delete`, `min`, `max`, in-order iteration and `in` |
| `structkit.heap` | `MaxHeap` with an optional capacity, raising `HeapFullError` and `HeapEmptyError` |
| `structkit.hashtable` | `OpenAddressingTable` (linear probing with tombstones) and `ChainedHashTable` (separate chaining, raises `DuplicateKeyError`) |
| `structkit.lru_cache` | A thread-safe `LRUCache` with a fixed capacity; `get` returns `None` for a missing key |
| `structkit.calculator` | `calculate`, which evaluates non-negative integers joined by `+ - * /` with precedence and division toward zero |
| `structkit.stack` | A fixed-capacity `Stack` |
| `structkit.queues` | The unbounded `LinkedQueue` and the capacity-limited `BoundedQueue` (raises `QueueFullError`) |
| `structkit.ring_buffer` | `RingBuffer` (circular FIFO, raises `BufferFullError` / `BufferEmptyError`), `BlockingBuffer` (semaphore-guarded, hands items back newest first), and the `transfer` and `run_producers_consumers` thread helpers |
| `structkit.timers` | `TimingWheel` and `TimerList`, a sorted list over a fixed pool of `Timer`s, with `TimerType` and `CallbackResult` |
| `structkit.state_machine` | `AtmStateMachine`, which moves between `State`s as `Event`s arrive and ignores events that do not fit |
| `structkit.deck` | `shuffle_round` and `rounds_to_restore` for the deal-into-piles card puzzle (3, 4, 5, 3, ... piles per round) |
| `structkit.airline` | `Airline`, `Cabin`, the fee calculators, `calculator_for`, `parse_ticket` and `process_tickets` |
| `structkit.worker` | `WorkerThread`, a thread fed through a message queue that records posted `UserData` |

## A few examples

```python
from structkit.calculator import calculate
from structkit.heap import MaxHeap
from structkit.bst import BinarySearchTree
from structkit.deck import rounds_to_restore

calculate("3+2*2")          # 7

heap = MaxHeap(10)
for value in (1, 5, 3):
    heap.push(value)
heap.peek()                 # 5

tree = BinarySearchTree([5, 7, 2, 3])
list(tree)                  # [2, 3, 5, 7]
3 in tree                   # True

rounds_to_restore(0)        # 1
```

## Command-line tools

Installing the package adds four commands:

- `structkit-deck N` deals a deck of `N` cards into 3, 4 and 5 piles in turn,
  prints the deck after every round, and reports how many rounds it takes for
  the deck to return to its original order.
- `structkit-airline [TICKET ...]` prints the fee of each ticket given as
  `'airline miles cabin'`, or of a built-in set of sample tickets when none
  is given.
- `structkit-atm` runs the ATM state machine. Before each read it prints the
  current state and the list of event numbers; it reads one event number per
  line from standard input until the input ends.
- `structkit-worker [--wait SECONDS]` starts two worker threads, posts a
  message to each, waits, and then stops them.

## What it does not do

- The timers do not run on a clock: `TimingWheel.tick` and `TimerList.tick`
  must be called by the program that uses them.
- `WorkerThread` only records the data posted to it; its periodic timer ends
  the worker on its first expiry.
- `k_way_merge` does not open files itself; pass it open files or any other
  sorted iterables.
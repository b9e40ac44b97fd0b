# osalgos

Classic operating-system algorithms, written as small, readable Python
functions and classes you can call, test and take apart. It has no
dependencies beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `osalgos.cpu_scheduling` | `fcfs`, `sjf`, `round_robin`, `round_robin_with_arrival`, `format_table`, with `ProcessStats` and `ScheduleResult` |
| `osalgos.shortest_remaining` | `srtf` and `clairvoyant_sjf` over `Job` records |
| `osalgos.priority_scheduling` | `non_preemptive_priority` and `preemptive_priority` over `PriorityJob`, giving `PriorityStats` |
| `osalgos.disk_scheduling` | `look`, `c_look`, `c_scan`, `scan`, `sstf`, each giving a `SeekResult` |
| `osalgos.bankers` | `safe_sequence` for deadlock avoidance; raises `UnsafeStateError` |
| `osalgos.page_replacement` | `second_chance`, `lru`, `optimal`, each giving a `ReplacementResult` |
| `osalgos.memory_allocation` | `first_fit`, `best_fit`, `worst_fit`, and a `FreeListAllocator` with `allocate` and `release`; raises `AllocationError` |
| `osalgos.arithmetic` | `booth_multiply` and `karatsuba` |
| `osalgos.rbtree` | `RedBlackTree` with `insert`, `delete`, membership, iteration and length; raises `DuplicateKeyError` |
| `osalgos.linked_list` | `DoublyLinkedList` with `push_front`, `merge_sort`, forward and `reversed()` iteration |
| `osalgos.functional` | `reduce_ints` with `add`, `sub`, `mul`, and `compute_sum` |
| `osalgos.mutex` | `PetersonLock`, `BakeryLock`, `count_with_peterson`, `use_resource_with_bakery` |
| `osalgos.producer_consumer` | `BoundedBuffer` with `produce` and `consume`; raises `BufferFull` / `BufferEmpty` |

## Install

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from osalgos.cpu_scheduling import round_robin, format_table
from osalgos.disk_scheduling import sstf
from osalgos.bankers import safe_sequence, UnsafeStateError
from osalgos.rbtree import RedBlackTree

print(format_table(round_robin([10, 5, 8], quantum=2)))

result = sstf([176, 79, 34, 60, 92, 11, 41, 114], head=50)
print(result.sequence, result.total)

allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
try:
    print(safe_sequence(allocation, maximum, [3, 3, 2]))
except UnsafeStateError:
    print("the system is not in a safe state")

tree = RedBlackTree()
for key in (7, 6, 5, 4, 3, 2, 1):
    tree.insert(key)
tree.delete(4)
print(list(tree), len(tree), 5 in tree)
```

## Command-line demos

Each command runs one area on a sample workload, or on the numbers you
pass it, and prints the results. Every command takes `--help`.

```
osalgos-cpu fcfs                      # also: sjf, rr, rr-arrival
osalgos-cpu rr --bursts 10 5 8 --quantum 2
osalgos-srtf                          # or: osalgos-srtf clairvoyant
osalgos-priority                      # or: osalgos-priority preemptive
osalgos-disk look --head 50           # also: c-look, c-scan, scan, sstf
osalgos-bankers --available 3 3 2
osalgos-pages lru 7 0 1 2 0 3 0 4 --frames 3   # also: second-chance, optimal
osalgos-memory best                   # also: first, worst, free-list
osalgos-arith karatsuba 1234 5678
osalgos-arith booth 6 -6 --bits 4
osalgos-rbtree 7 6 5 4 3 2 1 --delete 4
osalgos-mutex peterson --iterations 100000
osalgos-mutex bakery --threads 8
osalgos-buffer --capacity 10          # interactive menu: 1 produce, 2 consume, 3 exit
```

`osalgos-pages` reads the page references from standard input when none
are given on the command line.

## What it does not do

There is no dining-philosophers simulation: the synchronisation side of
the package covers Peterson's and the bakery locks and the bounded
producer-consumer buffer only.
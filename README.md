# algokit

A small collection of classic algorithms and data structures, written in
plain Python with no third-party dependencies.

## What is inside

Data structures:

- `algokit.disjoint_set.DisjointSet`: union–find over the nodes `0..n`
  with path compression, offering `find`, `union_by_rank`, `union_by_size`
  and `connected`.
- `algokit.segment_tree.MinSegmentTree`: range-minimum queries with point
  assignment (`update`) and point increment (`add`). The helpers
  `range_minimum_queries`, `dynamic_range_minimum` and
  `range_update_queries` run batches of 1-based queries.
- `algokit.fenwick.FenwickTree`: prefix and range sums with point
  additions, built with `FenwickTree(size)` or `FenwickTree.from_values`.
  The helpers `static_range_sums` and `dynamic_range_sums` run batches of
  1-based queries.
- `algokit.graph.Graph`: an adjacency-list graph with `add_edge`,
  `neighbours` and `format`, and `find_bridges` for locating the bridges of
  an undirected graph given as adjacency lists.

Contest-style problems:

- `algokit.problems`: `hello`, `distinct_numbers`,
  `increasing_array_moves`, `missing_number`, `beautiful_permutation`,
  `longest_repetition`, `subordinates`, `weird_algorithm` and
  `leftmost_min_subarrays`.
- `algokit.n_sum`: `n_sum` and `four_sum`, returning every distinct sorted
  combination that adds up to a target.

CPU scheduling:

- `algokit.schedule_report`: the `Process` record, `ScheduleSummary`,
  `ScheduleResult`, `summarize`, and text rendering with `pad`,
  `format_table`, `format_gantt_chart`, `format_summary` and
  `format_result`.
- `algokit.fcfs`: first-come, first-served (`first_come_first_serve`,
  `fcfs_stats`, `format_fcfs_table`).
- `algokit.round_robin`: `round_robin` with a Gantt chart, plus
  `round_robin_by_ticks` and `round_robin_queue`, which return
  `RoundRobinTimes`.
- `algokit.sjf`: `shortest_job_first`, `shortest_remaining_time_first`
  (both returning `BurstStats`, rendered by `format_burst_table`) and
  `shortest_remaining_time_queue`, which returns a `ScheduleResult`.

The schedulers never modify the processes passed in; they work on copies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.disjoint_set import DisjointSet

ds = DisjointSet(7)
ds.union_by_rank(1, 2)
ds.union_by_rank(2, 3)
ds.connected(1, 3)   # True
ds.connected(3, 7)   # False
```

```python
from algokit.problems import distinct_numbers, weird_algorithm

distinct_numbers([2, 3, 2, 2, 3])   # 2
weird_algorithm(3)                  # [3, 10, 5, 16, 8, 4, 2, 1]
```

```python
from algokit.fenwick import FenwickTree
from algokit.segment_tree import MinSegmentTree

FenwickTree.from_values([1, 2, 3, 4]).range_sum(1, 2)   # 5
MinSegmentTree([5, 3, 8]).query(0, 2)                   # 3
```

```python
from algokit.round_robin import round_robin
from algokit.schedule_report import Process, format_result

processes = [Process(0, 0, 12), Process(1, 2, 5), Process(2, 4, 10)]
print(format_result(round_robin(processes, 5)))
```

## Command line

A small demonstration of the disjoint-set structure is installed as a
command. It joins a few elements of a seven-element set and prints `Same` or
`Not same` for two of them, before and after one more union:

```
algokit-dsu
```

## What it does not do

- There are no interactive prompts: every algorithm is a function that takes
  its data as arguments and returns results or text to print.
- There is no heap or heap sort, no deadlock-avoidance (safe-state) checker,
  no mutual-exclusion lock, and no priority or response-ratio CPU
  schedulers.
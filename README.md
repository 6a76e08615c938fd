# sortbench

Time classic sorting algorithms on datasets of 32-bit signed integers.

sortbench ships six in-place sorting algorithms, a generator for benchmark
datasets and a command that averages the running time of one algorithm over
several repetitions on a dataset file. It has no dependencies beyond the
Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Generating datasets

```
sortbench-generate [directory] [--size N]
```

This writes four binary datasets into `directory` (the current directory by
default, created if missing), each `N` values long (2,621,440 by default):

- `dataset_ascendente.bin`: `0, 1, ..., N - 1`,
- `dataset_descendente.bin`: `N, N - 1, ..., 1`,
- `dataset_aleatorio.bin`: random values between 0 and 999,999,
- `dataset_parcial.bin`: descending values whose elements from the 66% mark
  onwards have been shuffled.

A dataset file is a plain sequence of little-endian 32-bit signed integers
with no header. A negative `--size` is rejected.

## Running a benchmark

```
sortbench <dataset_file> <algorithm> <repetitions>
```

The algorithm is one of:

| Name            | Algorithm                                         |
|-----------------|---------------------------------------------------|
| `InsertionSort` | insertion sort                                    |
| `MergeSort`     | top-down, stable merge sort                       |
| `QuickSort`     | quick sort with a random pivot                    |
| `HeapSort`      | in-place max-heap sort                            |
| `SortEstandar`  | Python's built-in sort                            |
| `RadixSort`     | LSD radix sort, base 256, four passes             |

Each repetition sorts a fresh copy of the dataset. The command prints the
total time and then the average time per repetition, both in milliseconds.
Too few arguments, a repetition count that is not an integer or is below 1,
a file that cannot be opened or an unknown algorithm name ends the command
with exit status 1 and a message on standard error. A trailing partial value
at the end of a dataset file is ignored.

## Using the library

Every sort function sorts the list it is given in place:

- `sortbench.insertion_sort.insertion_sort(values)`
- `sortbench.merge_sort.merge_sort(values)`
- `sortbench.quick_sort.quick_sort(values, rng=None)` takes an optional
  `random.Random` for pivot choice and returns a `QuickSortStats` with the
  number of `comparisons` and `swaps` it made.
- `sortbench.heap_sort.heap_sort(values)`, plus `queue_heap_sort(values)`,
  which sorts by passing the values through a min-heap `PriorityQueue`
  (`insert`, `extract_priority`, `is_empty`; `extract_priority` on an empty
  queue raises `IndexError`).
- `sortbench.radix_sort.radix_sort(values)` works on integers in the signed
  32-bit range and raises `ValueError` for any other value. It orders by the
  unsigned two's-complement bytes, so negative values end up after all
  non-negative ones (ordered among themselves).
- `sortbench.standard_sort.standard_sort(values)`

Datasets can be built in code with `sortbench.datasets`: `ascending(n)`,
`descending(n)`, `random_values(n, rng=None)`, `partially_shuffled(n, rng=None)`
and `save_binary(path, values)`, which raises `ValueError` for values that do
not fit in a signed 32-bit integer.
`sortbench.generate.generate_datasets(directory=".", n=2621440)` writes the
full set of four files and returns their paths.

For timing, `sortbench.benchmark` offers `read_dataset(path)`,
`measure_time(sort, data)` (milliseconds for one sort of a copy),
`measure_average(sort, data, repetitions)` (prints the total and returns the
mean) and `get_algorithm(name)`, which looks up a sort function by the names
in the table above and raises `KeyError` for an unknown name.
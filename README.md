# labkit

A handful of small command-line programs, each built around one classic
exercise, plus the functions behind them for use from Python.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### Mandelbrot membership

```
labkit-mandelbrot <real> <imaginary> [<N>]
```

Iterates `z = z*z + c` from `z = 0` for up to `N` steps (default 1000) and
reports whether `c` stays within radius 2:

```
$ labkit-mandelbrot 0.25 0
0.250000 + 0.000000i is in the Mandelbrot set
$ labkit-mandelbrot 1 1
1.000000 + 1.000000i is not in the Mandelbrot set
```

A wrong number of arguments prints a usage line, and an argument that is not
a number (or, for `N`, not an integer) prints an error; both exit with
status 1.

`labkit-mandelbrot-prompt` asks for pairs of numbers on standard input and
answers each one. It uses a single `Orbit` whose state carries over from one
question to the next, so later answers depend on earlier points. The session
ends with status 0 when either part entered is zero; input that is not two
numbers, or the end of input, ends it with an error and status 1.

From Python:

```python
from labkit.mandelbrot import Orbit, describe, is_in_mandelbrot

inside = is_in_mandelbrot(complex(-1, 0), 1000)   # fresh orbit from z = 0
print(describe(-1.0, 0.0, inside))

orbit = Orbit()                                    # state kept between calls
orbit.is_in_mandelbrot(complex(0.25, 0.1))
```

### Maximum subarray

```
labkit-max-subarray <seed> <size>
```

Fills an array of `size` values between -25 and 74 from a seeded generator
(`CRandom`, which reproduces the classic C library `rand()` sequence) and
prints the best subarray sum three times, once from each of the cubic,
quadratic and linear algorithms. The printed values are never below 0, so the
three lines always agree. Arguments are read like `atoi`: leading digits are
used and anything else counts as 0. A negative size is refused with an error
and status 1.

```python
from labkit.max_subarray import (
    generate_random_array,
    max_subarray_cubic,
    max_subarray_linear,
    max_subarray_quadratic,
)

values = generate_random_array(50, 7)
print(max_subarray_cubic(values), max_subarray_quadratic(values), max_subarray_linear(values))
```

All three return 0 for an empty list and agree whenever the list holds a
positive value. On a list of only negative numbers they differ:
`max_subarray_linear` counts the empty run and returns 0, while
`max_subarray_cubic` and `max_subarray_quadratic` return the largest single
element. `generate_random_array` raises `ValueError` for a negative size.

### Shortest paths

```
labkit-dijkstra
```

An interactive session: enter the number of vertices, the number of edges
(at most `V*(V-1)/2`), each edge as `src dest weight`, and a source vertex.
The program prints the distance to every vertex, or `INF` where none is
reachable, then offers to start over; answer `0` to stop. The session also
ends at the end of input. Edges are undirected; self-loops, negative weights,
out-of-range vertices and duplicate edges are refused and asked for again.

```python
from labkit.dijkstra import Graph, format_solution, shortest_distances

graph = Graph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 1)
print(shortest_distances(graph, 0))    # [0, 4, 5]
print(format_solution(shortest_distances(graph, 0)))
```

`shortest_distances` gives `None` for unreachable vertices. `Graph.add_edge`
raises `InvalidEdgeError` or `DuplicateEdgeError` (both `ValueError`s), and
`Graph(0)` raises `ValueError`.

### Messages over signals (POSIX)

In one terminal:

```
labkit-signal-receiver
```

It prints its process id and waits. In another:

```
labkit-signal-sender
```

Enter the receiver's process id and a number. The lowest eight bits are sent
most significant first, `SIGUSR1` for a 0 bit and `SIGUSR2` for a 1 bit, with
a short pause after each; the receiver prints `Received <n>` once eight bits
have arrived and exits.

`message_bits(message)` gives the bit sequence that will be sent,
`send_message(pid, message, delay)` sends it, and `BitReceiver` assembles
bits back into a byte: `push` returns the byte on the eighth bit and `None`
before that.

### Phonebook

```
labkit-add2pb "Alice,x100"
labkit-find-phone "Alice"
```

`labkit-add2pb` appends one `Name,Phone` line to `phonebook.txt` in the
current directory. `labkit-find-phone` treats its argument as a basic regular
expression, finds every line of `phonebook.txt` it matches, and prints the
phone part of each: spaces are first turned into `#`, the first comma becomes
the field separator, and the second field is shown (an empty line if there is
none). A missing phonebook or a bad pattern is reported on standard error.

```python
from labkit.phonebook import add_entry, find_phones

add_entry("Bob,x200", "phonebook.txt")
print(find_phones("Bob", "phonebook.txt"))   # ['x200']
```
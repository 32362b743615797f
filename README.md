# algokit

A compact library of classic algorithms and programming exercises, written as
plain, dependency-free Python. Each function is small, self-contained and
takes its input as arguments and returns its result.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.conversions` | `binary_to_decimal`, `binary_to_octal`, `decimal_to_binary`, `decimal_to_octal`, `octal_to_decimal`, `octal_to_binary`, `number_to_words` (up to four digits) |
| `algokit.numbers` | `fibonacci_series`, `fibonacci`, `factorial`, `power`, `is_leap_year`, `reverse_digits`, `armstrong_numbers`, `is_prime`, `karatsuba`, `calculate`, `determinant`, and the `Complex` class with `+` |
| `algokit.search` | `binary_search`, `binary_search_recursive`, `linear_search` (each returns an index or `None`) |
| `algokit.sorting` | `insertion_sort`, `selection_sort`, `radix_sort` (each returns a new list) |
| `algokit.arrays` | `max_subarray_sum`, `max_sum_naive`, `max_sum`, `stock_profit`, `rotate`, `invert_color`, `furthest_building`, `three_sum_closest`, `find_celebrity`, `min_path_cost`, `floyd_warshall` and its `INF` marker |
| `algokit.strings` | `remove_vowels`, `count_vowels`, `sum_of_integers`, `frequency_sort`, `roman_to_int`, `precedence`, `infix_to_postfix`, `lcs_length` |
| `algokit.automaton` | `Dfa`, a deterministic finite automaton over `0`/`1`, and `Step` |
| `algokit.game` | `GuessGame`, a guess-the-number game between 1 and 100, with `Verdict` and `GuessResult` |
| `algokit.trees` | `TreeNode` with `has_path_sum` and `is_balanced`; `GenericTreeNode` with `are_identical` and `parse_level_order` |
| `algokit.circular_list` | `CircularList`, a circular singly linked list |
| `algokit.patterns` | `butterfly` star pattern, `n_queens` |

## Examples

```python
from algokit.conversions import binary_to_decimal, number_to_words
from algokit.strings import infix_to_postfix, lcs_length, roman_to_int
from algokit.arrays import max_subarray_sum

binary_to_decimal("1011")                        # 11
number_to_words("9090")                          # 'nine thousand ninty'
roman_to_int("MCMXCIV")                          # 1994
lcs_length("AGGTAB", "GXTXAYB")                  # 4
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])  # 7
infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i")        # 'abcd^e-fgh*+^*+i-'
```

Data structures:

```python
from algokit.circular_list import CircularList

ring = CircularList([1, 2, 3, 4])
ring.insert_at_head(5)
list(ring)       # [5, 1, 2, 3, 4]
ring.delete(5)   # 4  (positions count from 1)
str(ring)        # '5 1 2 3'
```

A finite automaton: each state maps to its next state on `0` and on `1`
(any symbol other than `0` is read as `1`).

```python
from algokit.automaton import Dfa

dfa = Dfa(transitions={"A": ("A", "B"), "B": ("A", "B")}, initial="A", finals={"B"})
dfa.accepts("0101")                  # True
[str(step) for step in dfa.trace("01")]
# ['A -> 0 -> A', 'A -> 1 -> B']
```

The guessing game takes guesses as method calls:

```python
from algokit.game import GuessGame, Verdict

game = GuessGame(number=42)
game.guess(50).verdict   # Verdict.TOO_HIGH
game.guess(42)           # GuessResult(verdict=Verdict.GUESSED, attempts=2)
```

Finding the number within two attempts gives `Verdict.GUESSED`, later
`Verdict.LATE`; guessing after the game is over raises `RuntimeError`.

Puzzles:

```python
from algokit.patterns import n_queens

n_queens(4)   # [(0, 1), (1, 3), (2, 0), (3, 2)]
n_queens(3)   # None
```

## Errors

Functions raise ordinary Python exceptions where the input makes no sense:
`ValueError` for a negative number passed to `factorial`, an unknown operator
passed to `calculate`, a non-square matrix passed to `determinant`, a
non-Roman character passed to `roman_to_int`, or a badly formed `Dfa`;
`IndexError` for an out-of-range position in `CircularList.delete` or a cell
outside the grid in `min_path_cost`.

## What it does not do

The package is a library only. It has no command-line programs and reads
nothing from the terminal: values that an interactive exercise would prompt
for are passed as arguments, and results are returned rather than printed.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install -e ".[test]"
pytest
```
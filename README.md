# studybench

A collection of small, self-contained study programs:

- `studybench.cstrings`: string and memory helpers that behave like the
  classic C routines (`strlen`, `strncpy`, `strncat`, `strcmp`, `strncmp`,
  `strstr`, `memcmp`, `memmove`, `memset`), plus `tokenize` and `reverse`.
  Text functions stop at the first NUL character; `memmove` and `memset`
  change a `bytearray` in place and return it.
- `studybench.bubble_sort`: `bubble_sort(items, compare=None)`, a stable
  bubble sort driven by a three-way comparison function. It returns a new list.
- `studybench.stack`: a `Stack` (`push`, `pop`, `top`, `is_empty`, `len()`)
  and `is_valid`, a bracket-matching check.
- `studybench.seqlist`: the array-backed sequences `SeqList` and `Vector`,
  which track a capacity that doubles as they fill.
- `studybench.slist`: a singly linked list, `SList`, built from `Node`s that
  can be passed back to `insert`, `erase`, `insert_after` and `erase_after`.
- `studybench.minesweeper`: a console minesweeper game (`Minesweeper`,
  `RevealResult`).
- `studybench.sokoban`: a console box-pushing game (`Sokoban`, `Tile`) with
  two built-in levels, `level_one()` and `level_two()`.
- `studybench.contacts`: a contact book (`Contact`, `ContactBook` in
  `studybench.contacts.book`) that can be saved to and loaded from a binary
  file, with a menu-driven console front end in `studybench.contacts.cli`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing the games

```
studybench-minesweeper [--rows 9] [--cols 9] [--mines 10] [--seed N]
studybench-sokoban [--level {1,2}]
```

Minesweeper asks for coordinates as `row col`, both counting from 1.
Revealing a mine ends the game; revealing every safe square wins it. Each
revealed square shows how many of its eight neighbours hold a mine.

In Sokoban, type `w`, `a`, `s` or `d` (several in one line if you like) and
press Enter to move; `z` returns to the menu. Push every box onto a storage
square to finish the level. Level 2 is played by default.

## Contact book

```
studybench-contacts [--file contacts.dat]
```

On start the book is loaded from the file (default `contacts.dat` in the
current directory). The menu lets you add, delete (by position, last, first),
revise, find, delete all, show, sort (by name, age or sex) and save contacts.

The same book can be used from code:

```python
from studybench.contacts.book import Contact, ContactBook

book = ContactBook()
book.add(Contact("Alice", "F", 30, 1234, "Springfield"))
book.add(Contact("Bob", "M", 25, 5678, "Shelbyville"))
book.sort_by("age")             # "name", "sex" or "age"
book.find("Alice")              # the Contact, or None
book.erase_at(1)                # positions count from 1
book.save("contacts.dat")
ContactBook().load("contacts.dat")   # returns the number of records read
```

Each contact is stored as a fixed-size record; a name may take at most 19
bytes in UTF-8, sex 5 and address 49. `Contact.pack()` raises `ValueError`
for text that does not fit.

## Library examples

```python
from studybench.stack import is_valid

is_valid("()[]{}")   # True
is_valid("(]")       # False
```

```python
from studybench.cstrings import strlen, strstr, tokenize

strlen("abcdef")                       # 6
strstr("abcdef", "cde")                # "cdef"
list(tokenize("abc ddd eeee", " "))    # ["abc", "ddd", "eeee"]
```

```python
from studybench.seqlist import SeqList

values = SeqList()
values.push_back(1)
values.push_back(2)
values.push_front(0)
list(values)                 # [0, 1, 2]
values.find(2)               # 2
```

## What it does not do

- The games read whole lines from standard input; there is no single-key
  input, arrow-key control or other full-screen terminal handling. The screen
  is cleared with ANSI escape codes.
- Minesweeper does not open up neighbouring empty squares automatically, and
  has no flags.
- The contact book is not saved automatically; choose "save" before exiting.
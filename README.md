# tdalib

A small collection of classic abstract data types, written as plain Python
classes:

| Module                 | Class          | What it holds                                                  |
|------------------------|----------------|----------------------------------------------------------------|
| `tdalib.rational`      | `Rational`     | A fraction whose `+ - * /` return results in lowest terms      |
| `tdalib.real_set`      | `RealSet`      | A sorted set of floats with doubling / halving capacity        |
| `tdalib.historic_date` | `HistoricDate` | A year (−9999 to 9999) with its list of distinct events        |
| `tdalib.chronology`    | `Chronology`   | Historic dates kept in year order, merged when years coincide  |
| `tdalib.max_stack`     | `MaxStack`     | A stack whose every element carries the maximum up to it       |
| `tdalib.dictionary`    | `Dictionary`   | Keys in ascending order, each with a list of meanings          |
| `tdalib.phonebook`     | `PhoneBook`    | Names mapped to one phone each, listed in name order           |

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Rationals

```python
from tdalib.rational import Rational

a = Rational(1, 2)
b = Rational(1, 3)
print(a + b)                             # (5,6)
print((a + b).to_slash())                # (5/6)
print(Rational(2, 4) == Rational(1, 2))  # True
print(Rational.parse("(3/4)"))           # (3,4)
```

A zero denominator raises `ZeroDivisionError`. `+=` adds in place without
reducing; `simplified()` returns the fraction in lowest terms.

### Sets of reals

```python
from tdalib.real_set import RealSet

s = RealSet([3, 1, 2])
s.insert(2)          # False: already present
s.remove(1)          # True
print(list(s))       # [2.0, 3.0]
print(2 in s)        # True
```

### Historic dates and chronologies

```python
from tdalib.historic_date import HistoricDate
from tdalib.chronology import Chronology

d = HistoricDate(1492, ["Discovery", "Granada"])
d.add_event("Granada")               # duplicates are dropped
print(len(d))                        # 2
print(d)                             # 1492#2#Discovery#Granada#

c = Chronology([d])
c.add_date(HistoricDate(1066, ["Hastings"]))
print([date.year for date in c])     # [1066, 1492]
print(c.find_year(1492))             # a copy of that date, or None
print(c.search("Gran"))              # a chronology with the matching events
```

`HistoricDate` reads and writes the `year#count#event1#...#eventN#` format
through `parse`, `read` and `str()`; whitespace inside events is not kept when
reading. A `Chronology` is written as a line with the number of dates followed
by one date per line, and read back the same way.

### Max stack

```python
from tdalib.max_stack import MaxStack

s = MaxStack()
for value in (1, 3, 2):
    s.push(value)
print(s.top())                       # Elemento: 2 Máximo: 3
s.pop()
print(s.top().maximum)               # 3
```

`top()` on an empty stack raises `IndexError`; `pop()` on an empty stack
returns `None`. Iteration goes from the top down.

### Dictionary and phone book

```python
from tdalib.dictionary import Dictionary
from tdalib.phonebook import PhoneBook

words = Dictionary()
words.insert("house", ["a building for living in"])
words.add_meaning("house", "a family line")
print(words.get_info("house"))       # both meanings, in order
print(words.get_info("missing"))     # []

book = PhoneBook()
book.insert("Alice", "phone-a")
print(book.get_phone("Alice"))       # phone-a
print(book.get_phone("Nobody"))      # empty string when absent
other = PhoneBook([("Bob", "phone-b")])
print(list(book + other))            # [('Alice', 'phone-a'), ('Bob', 'phone-b')]
```

`Dictionary.read` takes the number of keys, then for each key a line with
the key, a line with the number of meanings and one line per meaning.
`PhoneBook.read` takes `name<TAB>phone` lines.

## Command-line demonstrations

Each module comes with a small demonstration program:

```
tdalib-rational              # reads two rationals written as (n/d) from standard input
tdalib-real-set              # builds two sets of reals and prints their intersection
tdalib-historic-date A B C   # reads a historic date from each of three files, joins and searches them
tdalib-chronology A B        # reads a chronology from each of two files, searches and joins them
tdalib-max-stack             # pushes and pops integers and characters on max stacks
tdalib-dictionary < data.txt # reads a dictionary, then a word, from standard input
tdalib-phonebook FILE        # loads a tab-separated phone book and answers queries from standard input
```

The programs print their messages in Spanish.

## What it does not do

Everything lives in memory. The types read from and write to text streams,
but nothing is stored on disk by the package itself.
# lessons

A collection of small, self-contained examples of everyday programming
ideas, arranged by topic, together with two little console programs.

## Installing

```
pip install .
pip install ".[test]"   # adds pytest for running the tests
```

## What is inside

The topic modules are meant to be read and called from a Python shell:

- `lessons.functions` – `fibonacci`, `factorial`, `add` (two or three
  numbers), `swap`, `swap_cells` with `Cell`, `total` with a default
  quantity of one, `join_marks` and the stateful `ProductCounter`, which
  returns `a * b` plus the number of times it has been called.
- `lessons.complex_numbers` – a `Complex` value type with integer parts that
  supports `+` and prints as `"a + bi"`, `default_complex()` and a
  `Calculator` that sums real or imaginary parts.
- `lessons.binary` – `is_binary` and `ones_complement`.
- `lessons.shop` – `Shop`, which holds up to 100 `Item`s, totals them and
  reports a line per item.
- `lessons.deposit` – `compound_percent` and `compound_fraction`, each
  returning a `Deposit` that can `describe()` itself.
- `lessons.objects` – `Holder` with `combined` and `exchange`, `Simple`
  with a default second value, `Number.copy()` and `InstanceTracker`, a
  context manager that logs creation and release of instances.
- `lessons.polymorphism` – `Shape` and `Extended` with an overridden
  `display()`, and the abstract `Tutorial` with `VideoTutorial` and
  `TextTutorial`.
- `lessons.files` – `write_text`, `read_lines` and `write_student_list`.
- `lessons.containers` – `vector_steps`, `list_steps`, `sorted_marks`,
  `sort_steps` and `format_elements`, which walk through list, deque,
  mapping and sorting operations step by step.

A few examples:

```python
from lessons.functions import fibonacci, factorial
from lessons.binary import ones_complement
from lessons.deposit import compound_percent

fibonacci(10)             # 55
factorial(5)              # 120
ones_complement("1010")   # "0101"
compound_percent(1000, 2, 10).describe()
# ['Principal amount was 1000', 'Return value after 2 year is 1210']
```

## Programs

Two interactive console programs are installed with the package.

### Login system

```
lessons-accounts [--records PATH]
```

A menu for logging in, registering and looking up the password of a user
id. Accounts are kept as whitespace-separated pairs in a plain text file,
`records.txt` by default. In code:

```python
from lessons.accounts import AccountStore

password = "password"
store = AccountStore("records.txt")
store.register("alice", password)
store.authenticate("alice", password)   # True
store.recover("alice")                  # "password"
```

### Quiz game

```
lessons-quiz [--directory DIR]
```

A timed multiple-choice quiz with optional negative marking (10 points for
a correct answer, 2.5 taken off for a wrong one when enabled) and an
analysis report at the end. The subjects are read from `PHY.txt`,
`CHEM.txt`, `C++.txt`, `CS.txt`, `GK.txt` and `IC.txt` in the chosen
directory. In these files each question follows a line containing the word
`Question`: one line of question text, four option lines and a line with
the correct answer.

```python
from lessons.quiz import Quiz, read_questions

questions = read_questions("PHY.txt")
report = Quiz(questions, time_limit=60, negative_marking=True).run(["A", "C"])
print("\n".join(report.lines()))
```

## What it does not do

The package has no password generator or password strength checker, and
no command for either. Question files for the quiz are not included; they
must be supplied.

## Running the tests

```
pytest
```
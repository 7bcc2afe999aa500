# organized

A small inventory of workshop parts. Each part has a type (`ACTUATOR`,
`DEVICE`, `PROCESSOR`, `SENSOR` or `WIRE`), a name and an id. Ids are
handed out in the order the parts are added, starting at 0. You can list
the inventory, remove parts by id, and sort it on up to three criteria.

## Working with a workshop

```python
import io

from organized.workshop import Workshop, WorkshopError

out = io.StringIO()
shop = Workshop(out)          # with no argument, messages go to sys.stdout

shop.add(["WIRE", "red", "SENSOR", "thermo"])
# WIRE n°0 - "red" added.
# SENSOR n°1 - "thermo" added.

shop.display()
# SENSOR n°1 - "thermo"
# WIRE n°0 - "red"

shop.sort(["NAME", "-r"])
shop.delete(["0"])
# WIRE n°0 - "red" deleted.

len(shop)     # 1
list(shop)    # the remaining Element objects, in display order
```

New parts go to the front of the list. A display made before any sort
therefore shows the most recently added part first.

### Rules

- `add` takes pairs of type and name. If there are no arguments, an odd
  number of them, or an unknown type, it raises `WorkshopError` and adds
  nothing.
- `delete` takes ids made only of digits. Anything else raises
  `WorkshopError`. Ids that match no part are ignored.
- `sort` takes criteria from `TYPE`, `NAME` and `ID`. Each criterion may be
  followed by `-r` to reverse it. The first criterion decides the order and
  the next two break ties. Any criteria after the third are accepted but
  have no effect. An unknown word, or no criterion at all, raises
  `WorkshopError`. The sort is a selection sort and is not stable: parts
  that compare equal may change their relative order.
- `display` writes one line per part, in the current order. Any arguments
  passed to it are ignored.

Types sort in the order `ACTUATOR`, `DEVICE`, `PROCESSOR`, `SENSOR`, `WIRE`.
Names sort by character code.

## Lower-level pieces

- `organized.element` holds `ElementType`, an `IntEnum` with
  `ElementType.from_name`, which raises `ValueError` for an unknown name. It
  also holds `Element`, a frozen dataclass with the fields `kind`, `name`
  and `id`. Its `describe()` method returns the `TYPE n°ID - "name"` text.
- `organized.ordering` turns arguments into a tuple of `SortKey` values
  with `parse_order`. It compares two elements with `compare` and returns a
  sorted list with `sort_elements`. Bad arguments raise `SortOrderError`,
  which is a subclass of `ValueError`.
- `organized.strutils` has small string and number helpers:
  - `getnbr` reads the first number in a string and returns 0 when the
    value overflows a signed 32-bit integer.
  - `strcmp` returns -1, 0 or 1.
  - `is_numeric` checks that a string holds only digits.
  - `is_prime` and `find_prime_sup` test for and find primes.
  - `compute_power` raises a number to a power.
  - `compute_square_root` returns an exact integer square root, or 0 when
    there is none.
  - `str_to_word_array` splits a string into its runs of ASCII letters and
    digits.
  - `capitalize` capitalises each word.

## What it does not do

The package is a library only. It has no interactive prompt and no
command-line program. It does not read commands from standard input. The
inventory lives in memory and is not saved anywhere.

## Tests

The test suite uses pytest, which you can install through the `test` extra.
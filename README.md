# boxkeeper

A small interactive console program for keeping a list of boxes. Each box
has a name, a length, a width, a depth, a material and a note on whether it
is suitable for food. At most ten boxes can be kept at a time.

## Installing

```
pip install .
```

## Running

There are three menus. All offer the same actions:

```
0 - Exit the program
1 - Add a box (max 10)
2 - View all boxes
3 - Receive / view the details of a box
4 - Remove a box
5 - Update all box parameters
6 - Update a specific parameter
```

They differ in how they ask for input:

- `boxkeeper` is the plain menu. Boxes are picked by their position in the
  list, and every text answer is read as one whitespace-separated word.
- `boxkeeper-validated` checks what you type. Sizes must be positive, the
  food question only accepts `yes` or `no`, names and materials may hold
  spaces, and input that is not a number is reported, not acted on.
- `boxkeeper-ids` gives each box an ID when it is added. Boxes are picked by
  ID, and IDs are never reused after a box is removed.

Each menu also ends when its input runs out.

## Using it from Python

The data model lives in `boxkeeper.models`:

```python
from boxkeeper.models import Box, BoxList, BoxStore

boxes = BoxList()
boxes.add(Box(name="Crate", length=2, width=3, depth=4,
              material="wood", suitable_for_food="no"))
for number, box in boxes.numbered():
    print(number, box.name)

store = BoxStore()
box_id = store.add(Box(name="Tin", length=1, width=1, depth=1,
                       material="steel", suitable_for_food="yes"))
store.update(box_id, material="aluminium")
```

`BoxList` addresses boxes by their 1-based position; removing a box moves
the later ones up. `BoxStore` addresses boxes by the ID it hands out and sets
on the box. Both offer `add`, `get`, `remove` and `update`; `update` accepts
only the box's own fields and raises `TypeError` for any other name.

Adding an eleventh box raises `BoxLimitError`; asking for a number or ID
that is not there raises `BoxNotFoundError`.

Each menu's `run(console, ...)` takes a `boxkeeper.console.Console`, which
reads from and writes to any text streams given to it (standard input and
output by default), so a session can be driven from a script or a test.

## What it does not do

Boxes are kept in memory only. Nothing is saved to disk, and every box is
gone when the program exits.

## Running the tests

```
pip install ".[test]"
pytest
```
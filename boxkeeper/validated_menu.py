"""Interactive box menu that checks every value it reads."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from boxkeeper.console import Console, InputExhausted
from boxkeeper.models import Box, BoxList, format_number

_RULE = "----------------------"
_MENU = (
    _RULE,
    "0 - Exit the program",
    "1 - Add a box (max 10)",
    "2 - View all boxes",
    "3 - View box details",
    "4 - Remove a box",
    "5 - Update all box parameters",
    "6 - Update a specific parameter",
    _RULE,
)
_NOT_A_NUMBER = "Invalid input! Please enter a number."
_BAD_BOX = "Invalid box number!"
_YES_NO = ("yes", "no")


class _Abort(Exception):
    """Leaves the current menu action and returns to the main menu."""


def ask_positive(console: Console, prompt: str) -> float:
    """Prompt until a number greater than zero is entered."""
    while True:
        console.write(prompt)
        try:
            value = console.next_float()
        except ValueError:
            value = 0.0
        if value <= 0:
            console.say("Value must be positive!")
            console.skip_line()
            continue
        console.skip_line()
        return value


def ask_yes_no(console: Console, prompt: str) -> str:
    """Prompt until the answer is exactly 'yes' or 'no'."""
    while True:
        console.write(prompt)
        answer = console.read_line()
        if answer in _YES_NO:
            return answer


def describe_box(box: Box) -> str:
    """Return the full parameter listing of a box."""
    return "\n".join(
        (
            "-----------------------------------",
            "Parameters of the box:",
            f"Box Name: {box.name}",
            f"Length: {format_number(box.length)}",
            f"Width: {format_number(box.width)}",
            f"Depth: {format_number(box.depth)}",
            f"Material: {box.material}",
            f"Suitable For Food: {box.suitable_for_food}",
        )
    )


def _read_int(console: Console) -> int:
    try:
        return console.next_int()
    except ValueError:
        console.skip_line()
        console.say(_NOT_A_NUMBER)
        raise _Abort from None


def _pick(console: Console, boxes: BoxList, heading: str) -> int:
    console.say(heading)
    for number, box in boxes.numbered():
        console.say(f"{number}) {box.name}")
    console.write("Enter box number: ")
    number = _read_int(console)
    if not 1 <= number <= len(boxes):
        console.say(_BAD_BOX)
        raise _Abort
    return number


def _add(console: Console, boxes: BoxList) -> None:
    if len(boxes) >= boxes.limit:
        console.say("The box limit has been reached (max 10 boxes)!")
        return
    length = ask_positive(console, "Length: ")
    width = ask_positive(console, "Width: ")
    depth = ask_positive(console, "Depth: ")
    console.write("Material: ")
    material = console.read_line()
    suitable = ask_yes_no(console, "Suitable For Food (yes/no): ")
    console.write("Box Name: ")
    name = console.read_line()
    boxes.add(Box(length, width, depth, material, suitable, name))
    console.say("Box added successfully!")


def _view(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("No boxes added yet!")
        return
    console.say("List of all boxes: ")
    for number, box in boxes.numbered():
        console.say(f"{number}) {box.name}")


def _details(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("There are no boxes to view!")
        return
    number = _pick(console, boxes, "Select a box to view details: ")
    console.say(describe_box(boxes.get(number)))


def _remove(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("No boxes to remove!")
        return
    number = _pick(console, boxes, "Select a box to remove: ")
    boxes.remove(number)
    console.say("Box removed successfully!")


def _update_all(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("No boxes to update!")
        return
    number = _pick(console, boxes, "Select a box to update: ")
    length = ask_positive(console, "New Length: ")
    width = ask_positive(console, "New Width: ")
    depth = ask_positive(console, "New Depth: ")
    console.write("New Material: ")
    material = console.read_line()
    suitable = ask_yes_no(console, "New Suitable For Food (yes/no): ")
    console.write("New Box Name: ")
    name = console.read_line()
    boxes.update(
        number,
        length=length,
        width=width,
        depth=depth,
        material=material,
        suitable_for_food=suitable,
        name=name,
    )
    console.say("Box updated successfully!")


def _prompted_line(prompt: str) -> Callable[[Console], str]:
    def read(console: Console) -> str:
        console.write(prompt)
        return console.read_line()

    return read


_PARAMETERS: tuple[tuple[str, str, Callable[[Console], object]], ...] = (
    ("Name", "name", _prompted_line("Enter new name: ")),
    ("Length", "length", lambda c: ask_positive(c, "Enter new length: ")),
    ("Width", "width", lambda c: ask_positive(c, "Enter new width: ")),
    ("Depth", "depth", lambda c: ask_positive(c, "Enter new depth: ")),
    ("Material", "material", _prompted_line("Enter new material: ")),
    (
        "Suitable For Food",
        "suitable_for_food",
        lambda c: ask_yes_no(c, "Enter new Suitable For Food (yes/no): "),
    ),
)


def _update_one(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("No boxes to update!")
        return
    number = _pick(console, boxes, "Select a box to update: ")
    box = boxes.get(number)
    console.say("Select parameter to update: ")
    for position, (label, field_name, _) in enumerate(_PARAMETERS, start=1):
        value = getattr(box, field_name)
        shown = format_number(value) if isinstance(value, float) else value
        console.say(f"{position}) {label}: {shown}")
    console.write("Enter parameter number: ")
    choice = _read_int(console)
    if not 1 <= choice <= len(_PARAMETERS):
        console.say("Invalid parameter number!")
        return
    console.skip_line()
    _, field_name, reader = _PARAMETERS[choice - 1]
    boxes.update(number, **{field_name: reader(console)})
    console.say("Parameter updated successfully!")


_ACTIONS: dict[int, Callable[[Console, BoxList], None]] = {
    1: _add,
    2: _view,
    3: _details,
    4: _remove,
    5: _update_all,
    6: _update_one,
}


def run(console: Console, boxes: BoxList) -> None:
    """Show the menu and act on choices until exit or end of input."""
    while True:
        for line in _MENU:
            console.say(line)
        console.write("Enter your choice: ")
        try:
            choice = _read_int(console)
            if choice == 0:
                console.say("Exiting program...")
                return
            action = _ACTIONS.get(choice)
            if action is None:
                console.say("Invalid choice! Please enter a number between 0 and 6.")
                console.skip_line()
                continue
            action(console, boxes)
        except _Abort:
            continue
        except InputExhausted:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="boxkeeper-validated",
        description="Keep track of up to ten boxes, with checked input.",
    )
    parser.parse_args(argv)
    run(Console(), BoxList())
    return 0
"""Interactive menu that manages boxes by their position in a list."""

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
    "3 - Receiving the box",
    "4 - Removing the box",
    "5 - Updating all box parameters",
    "6 - Updating a specific setting",
    _RULE,
)
_BAD_CHOICE = "Choose a number from the list, not a random one!"

_PARAMETERS: tuple[tuple[str, str, Callable[[Console], object]], ...] = (
    ("Name", "name", Console.next_token),
    ("Length", "length", Console.next_float),
    ("Width", "width", Console.next_float),
    ("Depth", "depth", Console.next_float),
    ("Material", "material", Console.next_token),
    ("SuitableForFood", "suitable_for_food", Console.next_token),
)


def _list_boxes(console: Console, boxes: BoxList) -> None:
    for number, box in boxes.numbered():
        console.say(f"{number}) Box: {box.name}")


def _pick(console: Console, boxes: BoxList, heading: str) -> int | None:
    console.say(heading)
    _list_boxes(console, boxes)
    console.write("Select a number from the list: ")
    number = console.next_int()
    if not 1 <= number <= len(boxes):
        console.say(_BAD_CHOICE)
        return None
    return number


def _add(console: Console, boxes: BoxList) -> None:
    if len(boxes) >= boxes.limit:
        console.say("Maximum Limit!")
        return
    console.write("Length: ")
    length = console.next_float()
    console.write("Width: ")
    width = console.next_float()
    console.write("Depth: ")
    depth = console.next_float()
    console.say("Material: ")
    material = console.next_token()
    console.say("Suitable For Food: ")
    suitable = console.next_token()
    console.write("Box Name: ")
    name = console.next_token()
    boxes.add(Box(length, width, depth, material, suitable, name))


def _view(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("No Boxes Added Yet!")
        return
    console.say("List Of All Boxes: ")
    _list_boxes(console, boxes)


def _receive(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("There are no boxes that can be received!")
        return
    number = _pick(console, boxes, "Select the box you want to receive: ")
    if number is None:
        return
    box = boxes.get(number)
    console.say("-----------------------------------")
    console.say("Parameters of the box you received:")
    console.say(f"Box Name: {box.name}")
    console.say(f"Length: {format_number(box.length)}")
    console.say(f"Width: {format_number(box.width)}")
    console.say(f"Depth: {format_number(box.depth)}")
    console.say(f"Material: {box.material}")
    console.say(f"Suitable For Food: {box.suitable_for_food}")


def _remove(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("Nothing to remove!")
        return
    number = _pick(console, boxes, "Select the box you want to remove: ")
    if number is None:
        return
    boxes.remove(number)
    console.say("The box has been successfully removed!")


def _update_all(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("Nothing to update!")
        return
    number = _pick(console, boxes, "Select the box you want to update: ")
    if number is None:
        return
    console.say("The number has been successfully received!")
    changes: dict[str, object] = {}
    for prompt, field_name, reader in (
        ("Box Name: ", "name", Console.next_token),
        ("Length: ", "length", Console.next_float),
        ("Width: ", "width", Console.next_float),
        ("Depth: ", "depth", Console.next_float),
        ("Material: ", "material", Console.next_token),
        ("Suitable For Food: ", "suitable_for_food", Console.next_token),
    ):
        console.write(prompt)
        changes[field_name] = reader(console)
    boxes.update(number, **changes)
    console.say("All parameters have been successfully updated!")


def _update_one(console: Console, boxes: BoxList) -> None:
    if not boxes:
        console.say("Nothing to update!")
        return
    number = _pick(console, boxes, "Select the box you want to receive: ")
    if number is None:
        return
    box = boxes.get(number)
    console.say("Select the parameter you want to receive: ")
    for position, (label, field_name, _) in enumerate(_PARAMETERS, start=1):
        value = getattr(box, field_name)
        shown = format_number(value) if isinstance(value, float) else value
        console.say(f"{position}) Parameter {label}: {shown}")
    console.write("Select a number from the list: ")
    choice = console.next_int()
    if not 1 <= choice <= len(_PARAMETERS):
        console.say(_BAD_CHOICE)
        return
    _, field_name, reader = _PARAMETERS[choice - 1]
    console.write("Enter your changes: ")
    boxes.update(number, **{field_name: reader(console)})
    console.say("The changes were successful!")


_ACTIONS: dict[int, Callable[[Console, BoxList], None]] = {
    1: _add,
    2: _view,
    3: _receive,
    4: _remove,
    5: _update_all,
    6: _update_one,
}


def run(console: Console, boxes: BoxList) -> None:
    """Show the menu and act on choices until exit or end of input."""
    while True:
        for line in _MENU:
            console.say(line)
        console.write("Write A Number: ")
        try:
            choice = console.next_int()
            if choice == 0:
                return
            action = _ACTIONS.get(choice)
            if action is None:
                console.say("Write A Valid Number!")
                continue
            action(console, boxes)
        except ValueError:
            console.say("Write A Valid Number!")
            console.skip_line()
        except InputExhausted:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="boxkeeper", description="Keep track of up to ten boxes."
    )
    parser.parse_args(argv)
    run(Console(), BoxList())
    return 0
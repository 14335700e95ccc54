"""Interactive menu that manages boxes by a stable numeric id."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from boxkeeper.console import Console, InputExhausted
from boxkeeper.models import Box, BoxNotFoundError, BoxStore, format_number

_RULE = "----------------------"
_MENU = (
    _RULE,
    "0 - Exit the program",
    "1 - Add a box (max 10)",
    "2 - View all boxes",
    "3 - Receive the box",
    "4 - Remove the box",
    "5 - Update all box parameters",
    "6 - Update a specific parameter",
    _RULE,
)

_PARAMETERS: tuple[tuple[str, str, str, Callable[[Console], object]], ...] = (
    ("Name", "name", "Enter new name: ", Console.next_token),
    ("Length", "length", "Enter new length: ", Console.next_float),
    ("Width", "width", "Enter new width: ", Console.next_float),
    ("Depth", "depth", "Enter new depth: ", Console.next_float),
    ("Material", "material", "Enter new material: ", Console.next_token),
    (
        "Suitable for food",
        "suitable_for_food",
        "Enter new suitable for food (yes/no): ",
        Console.next_token,
    ),
)


def _not_found(console: Console, box_id: int) -> None:
    console.say(f"Box with ID {box_id} not found!")


def _find(console: Console, store: BoxStore, prompt: str) -> Box | None:
    view_all_boxes(console, store)
    console.write(prompt)
    box_id = console.next_int()
    try:
        return store.get(box_id)
    except BoxNotFoundError:
        _not_found(console, box_id)
        return None


def display_menu(console: Console) -> None:
    """Print the main menu."""
    for line in _MENU:
        console.say(line)


def add_box(console: Console, store: BoxStore) -> None:
    """Read a new box's parameters and store it under a fresh id."""
    if len(store) >= store.limit:
        console.say("Maximum limit reached (10 boxes)!")
        return
    console.write("Length: ")
    length = console.next_float()
    console.write("Width: ")
    width = console.next_float()
    console.write("Depth: ")
    depth = console.next_float()
    console.write("Material: ")
    material = console.next_token()
    console.write("Suitable for food (yes/no): ")
    suitable = console.next_token()
    console.write("Box name: ")
    name = console.next_token()
    box_id = store.add(Box(length, width, depth, material, suitable, name))
    console.say(f"Box added successfully with ID: {box_id}")


def view_all_boxes(console: Console, store: BoxStore) -> None:
    """List the id and name of every stored box."""
    if not len(store):
        console.say("No boxes added yet!")
        return
    console.say("List of all boxes:")
    for box_id, box in store.items():
        console.say(f"ID: {box_id} | Name: {box.name}")


def receive_box(console: Console, store: BoxStore) -> None:
    """Show every parameter of the box with the entered id."""
    if not len(store):
        console.say("There are no boxes to receive!")
        return
    box = _find(console, store, "Enter the ID of the box you want to receive: ")
    if box is None:
        return
    console.say("-----------------------------------")
    console.say("Parameters of the box you received:")
    console.say(f"ID: {box.box_id}")
    console.say(f"Name: {box.name}")
    console.say(f"Length: {format_number(box.length)}")
    console.say(f"Width: {format_number(box.width)}")
    console.say(f"Depth: {format_number(box.depth)}")
    console.say(f"Material: {box.material}")
    console.say(f"Suitable for food: {box.suitable_for_food}")


def remove_box(console: Console, store: BoxStore) -> None:
    """Remove the box with the entered id."""
    if not len(store):
        console.say("Nothing to remove!")
        return
    view_all_boxes(console, store)
    console.write("Enter the ID of the box you want to remove: ")
    box_id = console.next_int()
    try:
        store.remove(box_id)
    except BoxNotFoundError:
        _not_found(console, box_id)
        return
    console.say(f"Box with ID {box_id} has been successfully removed!")


def update_all_parameters(console: Console, store: BoxStore) -> None:
    """Read new values for every parameter of the box with the entered id."""
    if not len(store):
        console.say("Nothing to update!")
        return
    box = _find(console, store, "Enter the ID of the box you want to update: ")
    if box is None:
        return
    changes: dict[str, object] = {}
    for _, field_name, prompt, reader in _PARAMETERS:
        console.write(prompt)
        changes[field_name] = reader(console)
    store.update(box.box_id, **changes)
    console.say(
        f"All parameters have been successfully updated for box ID: {box.box_id}"
    )


def update_specific_parameter(console: Console, store: BoxStore) -> None:
    """Read a new value for one chosen parameter of the box with the entered id."""
    if not len(store):
        console.say("Nothing to update!")
        return
    box = _find(console, store, "Enter the ID of the box you want to update: ")
    if box is None:
        return
    console.say("Select the parameter to update:")
    for position, (label, field_name, _, _) in enumerate(_PARAMETERS, start=1):
        value = getattr(box, field_name)
        shown = format_number(value) if isinstance(value, float) else value
        console.say(f"{position}) {label}: {shown}")
    console.write("Enter parameter number to update: ")
    choice = console.next_int()
    if not 1 <= choice <= len(_PARAMETERS):
        console.say("Invalid parameter choice!")
        return
    _, field_name, prompt, reader = _PARAMETERS[choice - 1]
    console.write(prompt)
    store.update(box.box_id, **{field_name: reader(console)})
    console.say(f"Parameter updated successfully for box ID: {box.box_id}")


_ACTIONS: dict[int, Callable[[Console, BoxStore], None]] = {
    1: add_box,
    2: view_all_boxes,
    3: receive_box,
    4: remove_box,
    5: update_all_parameters,
    6: update_specific_parameter,
}


def run(console: Console, store: BoxStore) -> None:
    """Show the menu and act on choices until exit or end of input."""
    while True:
        display_menu(console)
        console.write("Write a number: ")
        try:
            choice = console.next_int()
            console.skip_line()
            if choice == 0:
                return
            action = _ACTIONS.get(choice)
            if action is None:
                console.say("Write a valid number!")
                continue
            action(console, store)
        except ValueError:
            console.say("Write a valid number!")
            console.skip_line()
        except InputExhausted:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="boxkeeper-ids",
        description="Keep track of up to ten boxes, each with its own id.",
    )
    parser.parse_args(argv)
    run(Console(), BoxStore())
    return 0
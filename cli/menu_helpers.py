# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Tutorly application.

This module provides utilities for:
- Displaying the numbered menu and record listings
- Reporting a `Response` to the user
- Prompting for text, optional edits, IDs, and yes/no confirmation

Blank input is the universal way out of a prompt: required prompts treat it as cancel, and edit
prompts treat it as "keep the current value".
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response
from logic.commands.command import UNSET, Unset
from logic.logic_manager import LogicManager


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The banner displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for option 0. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects option 0.
        Callable[..., Any]: The action paired with the selected label.

    Notes:
        - The menu is shown again until a listed number is entered.
    """
    while True:
        print(f"\n{title}")

        for number, (label, _) in enumerate(options, 1):
            print(f"{number:>2}. {label}")

        print(f"{0:>2}. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1][1]

        print("Invalid selection. Please try again.")


def display_records(
    heading: str,
    records: Iterable[Any],
    formatter: Callable[[Any], str] = str,
) -> None:
    records = tuple(records)

    print(f"\n{formatters.format_banner_text(heading)}")

    if not records:
        print(f"There are no {heading.lower()} yet.")
        return

    for record in records:
        print(formatter(record))

    print(f"({len(records)} total)")


def display_response(response: Response, debug: bool = False) -> None:
    """
    Prints the feedback of a successful `Response`, or the error of a failed one.

    Args:
        response (Response): The response to report.
        debug (bool, optional): If True, failures also print their trace when present. Defaults to False.
    """
    if not response.success:
        print(f"\n[ERROR: {response.error_name}] {response.detail}")

        if debug and response.trace:
            print(f"\nDebug Trace: {response.trace}")

        return

    if response.detail:
        print(f"\n{response.detail}")


# === prompt user input methods ===


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(f"{prompt} (leave blank to cancel)")
    return MenuSignal.CANCEL if response == "" else response


def prompt_edit(field_name: str) -> str | Unset:
    response = prompt_user_input(f"Enter a new {field_name} (leave blank to keep):")
    return UNSET if response == "" else response


def prompt_session_id() -> int | MenuSignal:
    while True:
        response = prompt_user_input_or_cancel("Enter the session ID")

        if response is MenuSignal.CANCEL:
            return response

        if response.isdigit() and int(response) > 0:
            return int(response)

        print("Session IDs are positive whole numbers. Please try again.")


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n):").lower()

        if choice in ("y", "yes"):
            return True

        if choice in ("n", "no"):
            return False

        print("Invalid selection. Please try again.")


def prompt_if_dirty(logic_manager: LogicManager) -> None:
    if logic_manager.has_unsaved_changes and confirm_action(
        "There are unsaved changes to the tutor book. Do you want to save now?"
    ):
        display_response(logic_manager.save())


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")

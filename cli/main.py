# cli/main.py

"""
Main Menu for the Tutorly CLI.

Loads the tutor book from the configured data directory, then dispatches menu selections to commands
executed through a `LogicManager`. Every change goes through a command, so every change can be undone.
"""

from typing import Callable, cast

import cli.menu_helpers as helpers
import core.config as config
import core.formatters as formatters
import logic.messages as messages
from cli.menu_helpers import MenuSignal
from core.exceptions import TutorlyError
from logic.commands.attendance_commands import MarkAttendanceCommand
from logic.commands.command import UNSET, Command
from logic.commands.session_commands import AddSessionCommand
from logic.commands.student_commands import (
    AddStudentCommand,
    DeleteStudentCommand,
    EditStudentCommand,
    EditStudentDescriptor,
)
from logic.logic_manager import LogicManager
from models.identity import parse_identity
from models.student import Student
from storage.json_storage import JsonStorage


def main() -> None:
    storage = JsonStorage(config.DATA_DIR)

    print("\nLoading tutor book ...")

    load_response = storage.load()

    if not load_response.success:
        helpers.display_response(load_response)
        raise SystemExit(1)

    for reason in load_response.data["skipped"]:
        print(f"... skipped {reason}")

    print("... tutor book loaded successfully.")

    run_cli(LogicManager(load_response.data["tutor_book"], storage))


def run_cli(logic_manager: LogicManager) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("TUTORLY")
    options = [
        ("List Students", list_students),
        ("List Sessions", list_sessions),
        ("List Attendance", list_attendance),
        ("Add Student", add_student),
        ("Edit Student", edit_student),
        ("Delete Student", delete_student),
        ("Add Session", add_session),
        ("Mark Attendance", mark_attendance),
        ("Undo", undo),
        ("Save", save),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            helpers.prompt_if_dirty(logic_manager)
            exit_program()

        elif callable(menu_response):
            menu_response(logic_manager)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === list records ===


def list_students(logic_manager: LogicManager) -> None:
    helpers.display_records(
        "Students", logic_manager.tutor_book.students, messages.format_student
    )


def list_sessions(logic_manager: LogicManager) -> None:
    helpers.display_records(
        "Sessions", logic_manager.tutor_book.sessions, messages.format_session
    )


def list_attendance(logic_manager: LogicManager) -> None:
    helpers.display_records(
        "Attendance",
        logic_manager.tutor_book.attendance_records,
        messages.format_attendance_record,
    )


# === student commands ===


def add_student(logic_manager: LogicManager) -> None:
    name = helpers.prompt_user_input_or_cancel("Enter the student's name")

    if name is MenuSignal.CANCEL:
        return None
    name = cast(str, name)

    phone = helpers.prompt_user_input("Enter phone number (optional):")
    email = helpers.prompt_user_input("Enter email address (optional):")
    address = helpers.prompt_user_input("Enter address (optional):")
    tags = helpers.prompt_user_input("Enter tags separated by spaces (optional):")
    memo = helpers.prompt_user_input("Enter a memo (optional):")

    run_command(
        logic_manager,
        lambda: AddStudentCommand(
            Student(
                name=name,
                phone=phone,
                email=email,
                address=address,
                tags=tags.split(),
                memo=memo,
            )
        ),
    )


def edit_student(logic_manager: LogicManager) -> None:
    identity = prompt_student_identity()

    if identity is MenuSignal.CANCEL:
        return None

    name = helpers.prompt_edit("name")
    phone = helpers.prompt_edit("phone number")
    email = helpers.prompt_edit("email address")
    address = helpers.prompt_edit("address")
    tags = helpers.prompt_edit("set of tags, separated by spaces")
    memo = helpers.prompt_edit("memo")

    run_command(
        logic_manager,
        lambda: EditStudentCommand(
            parse_identity(identity),
            EditStudentDescriptor(
                name=name,
                phone=phone,
                email=email,
                address=address,
                tags=tags if tags is UNSET else tags.split(),
                memo=memo,
            ),
        ),
    )


def delete_student(logic_manager: LogicManager) -> None:
    identity = prompt_student_identity()

    if identity is MenuSignal.CANCEL:
        return None

    if not helpers.confirm_action(
        "Deleting a student also deletes their sessions and attendance. Continue?"
    ):
        helpers.returning_without_changes()
        return None

    run_command(logic_manager, lambda: DeleteStudentCommand(parse_identity(identity)))


# === session and attendance commands ===


def add_session(logic_manager: LogicManager) -> None:
    identity = prompt_student_identity()

    if identity is MenuSignal.CANCEL:
        return None

    date = helpers.prompt_user_input("Enter the session date (YYYY-MM-DD):")
    subject = helpers.prompt_user_input("Enter the subject:")

    run_command(
        logic_manager,
        lambda: AddSessionCommand(parse_identity(identity), date, subject),
    )


def mark_attendance(logic_manager: LogicManager) -> None:
    session_id = helpers.prompt_session_id()

    if session_id is MenuSignal.CANCEL:
        return None

    identity = prompt_student_identity()

    if identity is MenuSignal.CANCEL:
        return None

    is_present = helpers.confirm_action("Was the student present?")
    feedback = helpers.prompt_user_input("Enter feedback (optional):")

    run_command(
        logic_manager,
        lambda: MarkAttendanceCommand(
            session_id, parse_identity(identity), is_present, feedback
        ),
    )


# === history and persistence ===


def undo(logic_manager: LogicManager) -> None:
    helpers.display_response(logic_manager.undo())


def save(logic_manager: LogicManager) -> None:
    helpers.display_response(logic_manager.save())


# === helper methods ===


def prompt_student_identity() -> str | MenuSignal:
    return helpers.prompt_user_input_or_cancel(
        "Enter the student's ID or full name"
    )


def run_command(
    logic_manager: LogicManager, build_command: Callable[[], Command]
) -> None:
    """
    Builds a command from collected input and executes it.

    Args:
        logic_manager (LogicManager): The active `LogicManager`.
        build_command (Callable[[], Command]): Constructs the command; construction validates the input.

    Notes:
        - Invalid input is reported and nothing is executed.
    """
    try:
        command = build_command()

    except TutorlyError as e:
        print(f"\nInvalid input: {e}")
        return None

    helpers.display_response(logic_manager.execute(command))


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    main()

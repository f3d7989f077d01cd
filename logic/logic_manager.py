# logic/logic_manager.py

"""
Executes commands against the active `TutorBook` and keeps the undo history.

The `LogicManager` is the boundary between the command layer and its callers (the CLI): every
`TutorlyError` raised by a command is converted here into a failed `Response`, so callers never handle
exceptions for expected failures. Commands run one at a time on the calling thread, each to completion.

After a command succeeds, its reverse command is pushed onto a bounded history. `undo()` pops and runs
the latest reverse command without recording a new history entry.
"""

from __future__ import annotations

import traceback
from collections import deque

import core.config as config
import logic.messages as messages
from core.exceptions import (
    AmbiguousIdentityError,
    DuplicateElementError,
    DuplicateEntityError,
    EntityNotFoundError,
    FieldValidationError,
    InvariantViolationError,
    NoFieldsEditedError,
    TutorlyError,
)
from core.logger import get_logger
from core.response import ErrorCode, Response
from logic.commands.command import Command
from models.tutor_book import TutorBook
from storage.json_storage import JsonStorage

logger = get_logger(__name__)


class LogicManager:

    def __init__(
        self,
        tutor_book: TutorBook,
        storage: JsonStorage | None = None,
        undo_limit: int = config.UNDO_LIMIT,
    ):
        self._tutor_book: TutorBook = tutor_book
        self._storage: JsonStorage | None = storage
        self._history: deque[Command] = deque(maxlen=max(undo_limit, 0))

    # === properties ===

    @property
    def tutor_book(self) -> TutorBook:
        return self._tutor_book

    @property
    def has_unsaved_changes(self) -> bool:
        return self._tutor_book.has_unsaved_changes

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    # === command execution ===

    def execute(self, command: Command) -> Response:
        """
        Executes a command and records its reverse command for undo.

        Args:
            command (Command): The command to run.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the command was applied.
                    - False if the command was rejected; the TutorBook is unchanged.
                - detail (str | None):
                    - On success, the command's feedback message.
                    - On failure, a human-readable description of the error.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if an identity did not resolve.
                    - `ErrorCode.AMBIGUOUS_IDENTITY` if a name matched several students.
                    - `ErrorCode.DUPLICATE_ENTITY` if the change would create a duplicate.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a field failed validation.
                    - `ErrorCode.VALIDATION_FAILED` for other rejected commands.
                    - `ErrorCode.LOGIC_ERROR` if the TutorBook rejected an already validated change.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if an identity did not resolve
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "result" (CommandResult): The command's result, including its tab hint and reverse command.
                    - On failure:
                        - None

        Notes:
            - This method mutates `TutorBook` state through the command.
        """
        response = self._run(command)

        if response.success:
            reverse_command = response.data["result"].reverse_command

            if reverse_command is not None and self._history.maxlen:
                self._history.append(reverse_command)

        return response

    def undo(self) -> Response:
        """
        Reverts the most recent successful command.

        Returns:
            Response: Same contract as `execute()`, plus:
                - error `ErrorCode.NOTHING_TO_UNDO` if the history is empty.

        Notes:
            - A reverse command that fails is dropped from the history, since it can no longer apply.
        """
        if not self._history:
            return Response.fail(
                detail=messages.MESSAGE_NOTHING_TO_UNDO,
                error=ErrorCode.NOTHING_TO_UNDO,
            )

        reverse_command = self._history.pop()
        logger.info("Undoing with %r", reverse_command)

        response = self._run(reverse_command)

        if not response.success:
            logger.warning("Undo failed and was discarded: %s", response.detail)

        return response

    # === persistence ===

    def save(self) -> Response:
        if self._storage is None:
            return Response.fail(
                detail="No storage location is configured.",
                error=ErrorCode.INTERNAL_ERROR,
            )

        return self._storage.save(self._tutor_book)

    # === helper methods ===

    def _run(self, command: Command) -> Response:
        try:
            result = command.execute(self._tutor_book)

        except EntityNotFoundError as e:
            return self._fail(command, e, ErrorCode.NOT_FOUND, status_code=404)

        except AmbiguousIdentityError as e:
            return self._fail(command, e, ErrorCode.AMBIGUOUS_IDENTITY)

        except (DuplicateEntityError, DuplicateElementError) as e:
            return self._fail(command, e, ErrorCode.DUPLICATE_ENTITY)

        except NoFieldsEditedError as e:
            return self._fail(command, e, ErrorCode.NO_FIELDS_EDITED)

        except FieldValidationError as e:
            return self._fail(command, e, ErrorCode.INVALID_FIELD_VALUE)

        except TutorlyError as e:
            return self._fail(command, e, ErrorCode.VALIDATION_FAILED)

        except InvariantViolationError as e:
            logger.error("Invariant violated while executing %r: %s", command, e)
            return Response.fail(
                detail=f"Internal consistency error: {e}",
                error=ErrorCode.LOGIC_ERROR,
                trace=traceback.format_exc(),
            )

        except Exception as e:
            logger.exception("Unexpected error while executing %r", command)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
                trace=traceback.format_exc(),
            )

        else:
            logger.info("Executed %s: %s", type(command).__name__, result.feedback)

            return Response.succeed(
                detail=result.feedback,
                data={
                    "result": result,
                },
            )

    @staticmethod
    def _fail(
        command: Command,
        error: Exception,
        error_code: ErrorCode,
        status_code: int = 400,
    ) -> Response:
        logger.info("Rejected %s: %s", type(command).__name__, error)

        return Response.fail(
            detail=str(error),
            error=error_code,
            status_code=status_code,
        )

from __future__ import annotations

from enum import Enum
from typing import Awaitable, Callable, Dict, Optional

from app.lib.contact_models import (
    ServerFailure,
    SubmissionRequest,
    SubmissionResult,
    Success,
)


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class InvalidTransition(Exception):
    pass


class SubmissionStateMachine:
    """
    What the contact form shows, driven only by request lifecycle and results:
    - idle -> submitting on submit; a second submit while in flight is refused
    - submitting -> success | error when the result comes back
    - error -> idle on the next field edit
    - success is final until reset() (e.g. navigating back to the page)
    """

    def __init__(self):
        self._state = FormState.IDLE
        self._errors: Dict[str, str] = {}

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def sending(self) -> bool:
        return self._state == FormState.SUBMITTING

    @property
    def can_submit(self) -> bool:
        return self._state in (FormState.IDLE, FormState.ERROR)

    def begin(self) -> None:
        if not self.can_submit:
            raise InvalidTransition(f"cannot submit while {self._state.value}")
        self._errors = {}
        self._state = FormState.SUBMITTING

    def resolve(self, result: SubmissionResult) -> FormState:
        if self._state != FormState.SUBMITTING:
            raise InvalidTransition(f"no submission in flight (state={self._state.value})")
        if isinstance(result, Success):
            self._state = FormState.SUCCESS
        else:
            self._errors = dict(result.errors)
            self._state = FormState.ERROR
        return self._state

    def edit_field(self) -> None:
        if self._state == FormState.ERROR:
            self._errors = {}
            self._state = FormState.IDLE

    def reset(self) -> None:
        self._errors = {}
        self._state = FormState.IDLE


class ContactFormSession:
    """One rendered contact form: a state machine wired to a submit handler."""

    def __init__(
        self,
        handler: Callable[[SubmissionRequest], Awaitable[SubmissionResult]],
        machine: Optional[SubmissionStateMachine] = None,
    ):
        self._handler = handler
        self.machine = machine or SubmissionStateMachine()

    @property
    def state(self) -> FormState:
        return self.machine.state

    async def submit(self, request: SubmissionRequest) -> SubmissionResult:
        self.machine.begin()
        try:
            result = await self._handler(request)
        except BaseException:
            # never leave the view stuck in "submitting", cancellation included
            self.machine.resolve(ServerFailure(errors={"server": "Something went wrong."}))
            raise
        self.machine.resolve(result)
        return result

    def edit_field(self) -> None:
        self.machine.edit_field()

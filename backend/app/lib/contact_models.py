from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict

ValidationErrors = Dict[str, str]


class SubmissionRequest(BaseModel):
    """One contact form submission as posted by the site.

    `honeypot` is the hidden "name" input; humans never see it, so anything in
    it means the form was filled by a bot.
    """

    model_config = ConfigDict(frozen=True)

    honeypot: str = ""
    email: str = ""
    message: str = ""

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "SubmissionRequest":
        def _field(key: str) -> str:
            value = form.get(key)
            return "" if value is None else str(value)

        return cls(honeypot=_field("name"), email=_field("email"), message=_field("message"))


@dataclass(frozen=True)
class Success:
    status_code: int = 200

    def to_body(self) -> Dict[str, Any]:
        return {"success": True}


@dataclass(frozen=True)
class ValidationFailure:
    errors: ValidationErrors = field(default_factory=dict)
    status_code: int = 400

    def to_body(self) -> Dict[str, Any]:
        return {"errors": dict(self.errors)}


@dataclass(frozen=True)
class ServerFailure:
    errors: ValidationErrors = field(default_factory=dict)
    status_code: int = 500

    def to_body(self) -> Dict[str, Any]:
        return {"errors": dict(self.errors)}


SubmissionResult = Union[Success, ValidationFailure, ServerFailure]

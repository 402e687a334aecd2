"""
Exception types shared by the validation layer, the catalog services and the HTTP error handlers.
"""

from dataclasses import dataclass
from typing import Iterable, List

import pydantic


@dataclass(frozen=True)
class FieldIssue:
    """A single validation problem: where it happened and what is wrong."""
    path: str
    message: str

    def to_dict(self) -> dict:
        return {"path": self.path, "message": self.message}


class ValidationError(Exception):
    """
    Raised when a request fragment does not match its schema.

    Carries every violated field, not only the first one, so the caller can
    report all problems in a single response.
    """

    def __init__(self, issues: Iterable[FieldIssue]):
        self.issues: List[FieldIssue] = list(issues)
        if not self.issues:
            raise ValueError("ValidationError requires at least one field issue")
        super().__init__("; ".join(f"{issue.path}: {issue.message}" for issue in self.issues))

    @property
    def paths(self) -> List[str]:
        return [issue.path for issue in self.issues]

    def to_list(self) -> List[dict]:
        return [issue.to_dict() for issue in self.issues]

    @classmethod
    def from_pydantic(cls, exc: pydantic.ValidationError) -> "ValidationError":
        """
        Convert a pydantic ValidationError into field issues.

        Args:
            exc: The error raised by pydantic while validating a model

        Returns:
            ValidationError whose paths are the pydantic locations joined with dots
        """
        issues = []
        for error in exc.errors():
            path = ".".join(str(part) for part in error["loc"])
            issues.append(FieldIssue(path=path, message=error["msg"]))
        return cls(issues)


class InternalError(Exception):
    """Raised when validation or a service fails for a reason unrelated to the input shape."""


class NotFoundError(Exception):
    """Raised when a catalog record does not exist."""

    def __init__(self, resource: str, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} not found")

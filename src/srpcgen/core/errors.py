"""Error types raised while materializing a project."""

from __future__ import annotations


class GenerationError(Exception):
    """Base exception for project generation failures."""


class TemplateMismatchError(GenerationError):
    """Raised when a template's placeholders differ from what its transform supplies.

    Attributes:
        transform: Name of the transform the template was checked against.
        missing: Placeholders the transform supplies but the template lacks.
        unexpected: Placeholders found in the template the transform does not supply.
    """

    def __init__(self, transform: str, missing: set[str], unexpected: set[str]):
        self.transform = transform
        self.missing = missing
        self.unexpected = unexpected
        details = []
        if missing:
            details.append(f"missing {', '.join(sorted(missing))}")
        if unexpected:
            details.append(f"unexpected {', '.join(sorted(unexpected))}")
        super().__init__(f"Template does not match transform '{transform}': {'; '.join(details)}")


class WriteError(GenerationError):
    """Raised when a transform reports that nothing was written."""

    def __init__(self, destination: str):
        self.destination = destination
        super().__init__(f"Failed to write '{destination}'")

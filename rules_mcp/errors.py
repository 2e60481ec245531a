"""
Errors
Exception taxonomy for content loading and lookups.
"""

from typing import Iterable


class RulesMCPError(Exception):
    """Base error for the rules server."""


class InvalidDocument(RulesMCPError):
    """A content document could not be parsed into a record."""

    def __init__(self, source_id: str, reason: str):
        self.source_id = source_id
        self.reason = reason
        super().__init__(f"Invalid document {source_id}: {reason}")


class MissingFields(InvalidDocument):
    """Front matter lacks one or more required keys."""

    def __init__(self, source_id: str, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            source_id,
            f"missing required frontmatter fields: {', '.join(self.missing)}",
        )


class MalformedFields(InvalidDocument):
    """Front matter keys are present but hold unusable values."""

    def __init__(self, source_id: str, problems: dict[str, str]):
        self.problems = dict(problems)
        details = "; ".join(f"{name}: {reason}" for name, reason in self.problems.items())
        super().__init__(source_id, f"malformed frontmatter fields: {details}")


class UnreadableDirectory(RulesMCPError):
    """A content directory is missing or cannot be listed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read directory {path}: {reason}")


class UnknownValue(RulesMCPError, ValueError):
    """Text does not name a member of a closed set."""

    def __init__(self, field: str, value, allowed: Iterable[str]):
        self.field = field
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown {field}: {value!r} (expected one of: {', '.join(self.allowed)})"
        )


class UnknownSystem(UnknownValue):
    """Rule system outside the supported set."""

    def __init__(self, value, allowed: Iterable[str]):
        super().__init__("system", value, allowed)


class UnknownEntity(RulesMCPError, LookupError):
    """Requested tool, resource, prompt or collection is not loaded."""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.capitalize()} not found: {identifier}")

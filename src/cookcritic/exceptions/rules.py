"""Exceptions raised while declaring and loading rules."""

from __future__ import annotations

from pathlib import Path

from cookcritic.exceptions.base import CookcriticError


class RuleDefinitionError(CookcriticError, ValueError):
    """Raised when a rule declaration is malformed."""

    def __init__(self, message: str, *, line: int | None = None, field: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.field = field


class NoCurrentRuleError(RuleDefinitionError):
    """Raised when a declaration needs a current rule but none was declared yet."""


class InvalidMatcherKindError(RuleDefinitionError):
    """Raised when a matcher is registered for an unknown artifact kind."""


class RuleSchemaError(RuleDefinitionError):
    """Raised when a rule file does not match the rule-file schema."""


class RulePathError(CookcriticError, FileNotFoundError):
    """Raised when a rule path is neither a file nor a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Rule path is neither a file nor a directory: {path}")
        self.path = path


class RuleLoadError(CookcriticError):
    """Raised when a rule file cannot be loaded.

    Carries the originating file, the line when known, and a stable error
    code shared with rule validation output.
    """

    def __init__(
        self,
        path: Path | str,
        message: str,
        *,
        line: int | None = None,
        error_code: str = "",
        field: str = "",
    ) -> None:
        self.path = str(path)
        self.message = message
        self.line = line
        self.error_code = error_code
        self.field = field
        super().__init__(f"{self.location}: {message}")

    @property
    def location(self) -> str:
        """Return ``path`` or ``path:line`` for messages."""
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"


class StrategyBuildError(RuleDefinitionError):
    """Raised when a matcher strategy cannot be built from its parameters."""

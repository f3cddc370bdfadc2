"""Domain exceptions for slug generation and CLI diagnostics."""

from __future__ import annotations


class InvalidLimitError(ValueError):
    """Raised when a length or word limit is not a positive integer."""

    def __init__(self, field_name: str, value: object) -> None:
        """Initialize a limit error naming the offending argument."""

        super().__init__(f"`{field_name}` must be a positive integer, got {value!r}.")
        self.field_name = field_name
        self.value = value


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint

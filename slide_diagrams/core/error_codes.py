"""
Structured error codes for diagram loading, measurement and batch failures.
Use these keys in batch index rows and CLI messages.
"""

# Known error keys
INVALID_SPEC = "invalid_spec"
MEASUREMENT_FAILED = "measurement_failed"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_SPEC: "Diagram description is invalid. Check width, height, id, margins and label lists.",
    MEASUREMENT_FAILED: "A label could not be measured. Check LaTeX syntax or the font family.",
    RUN_FAILED: "Run failed. Check the diagram description and output directory.",
}


class MeasurementError(RuntimeError):
    """Raised when the label renderer cannot measure or typeset a label."""

    error_key = MEASUREMENT_FAILED

    def __init__(self, label: str, cause: Exception) -> None:
        super().__init__(f"Cannot measure label {label!r}: {type(cause).__name__}: {cause}")
        self.label = label
        self.cause = cause


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)

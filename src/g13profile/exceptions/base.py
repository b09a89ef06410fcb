"""Root of the g13profile exception hierarchy."""

from typing import Optional


class G13ProfileError(Exception):
    """
    Base exception for all g13profile errors.

    Every error carries two messages: a short one for the operator (printed
    as ``g13: <user_message>``) and a detailed one for the log. The class
    attribute `exit_code` is the status the CLI exits with when the error
    reaches it.

    Attributes:
        user_message: One line shown on stderr
        technical_message: Detail written to the log
        recovery_hint: What to change, shown with -v
    """

    exit_code: int = 1

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"

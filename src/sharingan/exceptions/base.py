"""Base exception for Sharingan."""

from typing import Dict, Optional


class SharinganError(Exception):
    """Base exception for all Sharingan errors.

    ``details`` carries the structured context of a failure and is
    rendered after the message as ``(key=value, ...)``.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    @property
    def reason(self) -> str:
        """Short cause of the failure, when the raiser recorded one."""
        return self.details.get("reason", "")

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"

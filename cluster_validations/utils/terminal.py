"""Centralized terminal formatting utilities for cluster-validations."""

from colorama import Fore, Style, init
import os
import re

# autoreset=True means colors reset after each print
init(autoreset=True)


class TerminalColors:
    """Centralized color scheme for consistent terminal output."""

    # Semantic color mapping for different message types
    ERROR = Fore.RED
    SUCCESS = Fore.GREEN
    RESET = Style.RESET_ALL

    BOLD = Style.BRIGHT

    # Check if colors should be disabled (for CI/CD environments)
    NO_COLOR = os.environ.get("NO_COLOR") is not None

    # Regex pattern to match ANSI escape sequences
    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove all ANSI escape sequences from text."""
        return cls.ANSI_ESCAPE_PATTERN.sub("", text)

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        if cls.NO_COLOR:
            return text
        return f"{cls.ERROR}{text}{cls.RESET}"

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        if cls.NO_COLOR:
            return text
        return f"{cls.SUCCESS}{text}{cls.RESET}"

    @classmethod
    def bold(cls, text: str) -> str:
        """Format text in bold."""
        if cls.NO_COLOR:
            return text
        return f"{cls.BOLD}{text}{cls.RESET}"

    @classmethod
    def format_issue(cls, field: str, status: int, message: str) -> str:
        """Format one failed settings check.

        The first line names the field and status; continuation lines of
        multi-line messages are indented under it.

        Args:
            field: Settings field that failed.
            status: HTTP status the API layer would answer with.
            message: User-facing error text.

        Returns:
            Formatted block with ANSI color codes for terminal display
        """
        lines = message.splitlines() or [""]
        head = f"{cls.error('✗')} {cls.bold(field)} ({status}): {lines[0]}"
        rest = [f"    {line.strip()}" for line in lines[1:]]
        return "\n".join([head, *rest])

    @classmethod
    def format_summary(cls, checked: int, failed: int) -> str:
        """Format the one-line result summary.

        Counts are colored only when > 0: passed in green, failed in red.
        """
        passed = checked - failed
        passed_str = cls.success(str(passed)) if passed > 0 else str(passed)
        failed_str = cls.error(str(failed)) if failed > 0 else str(failed)
        return f"{checked} checks, {passed_str} passed, {failed_str} failed."


# Single instance for use across the codebase
terminal = TerminalColors()

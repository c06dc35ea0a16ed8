"""Console theme and icons for CLI output."""

from rich.console import Console
from rich.table import Table
from rich.theme import Theme


ARTIFACT_BUILDER_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "info": "bold blue",
        "primary": "cyan",
        "muted": "dim",
    }
)


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    ERROR = "❌"
    INFO = "ℹ️"
    BULLET = "•"

    _TEXT_FALLBACKS = {
        "SUCCESS": "[OK]",
        "ERROR": "[ERROR]",
        "INFO": "[INFO]",
        "BULLET": "-",
    }

    @classmethod
    def get_icon(cls, icon_name: str, icon_mode: str = "emoji") -> str:
        """Get icon based on the specified mode.

        Args:
            icon_name: Name of the icon (e.g., "SUCCESS", "ERROR")
            icon_mode: Icon mode - "emoji" or "text"

        Returns:
            The appropriate icon based on mode
        """
        if icon_mode == "emoji":
            return str(getattr(cls, icon_name, ""))
        return cls._TEXT_FALLBACKS.get(icon_name, f"[{icon_name}]")


class ThemedConsole:
    """Console wrapper with the artifact builder theme applied.

    Messages are printed with markup disabled: paths and command output are
    shown verbatim.
    """

    def __init__(self, icon_mode: str = "emoji", stderr: bool = False) -> None:
        self.console = Console(theme=ARTIFACT_BUILDER_THEME, stderr=stderr)
        self.icon_mode = icon_mode

    def _print(self, icon_name: str, message: str, style: str) -> None:
        icon = Icons.get_icon(icon_name, self.icon_mode)
        self.console.print(
            f"{icon} {message}", style=style, markup=False, highlight=False, soft_wrap=True
        )

    def print_success(self, message: str) -> None:
        self._print("SUCCESS", message, "success")

    def print_error(self, message: str) -> None:
        self._print("ERROR", message, "error")

    def print_info(self, message: str) -> None:
        self._print("INFO", message, "info")

    def print_list_item(self, message: str, indent: int = 1) -> None:
        """Print list item with bullet and styling."""
        spacing = "  " * indent
        bullet = Icons.get_icon("BULLET", self.icon_mode)
        self.console.print(
            f"{spacing}{bullet} {message}",
            style="primary",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


def create_key_value_table(title: str) -> Table:
    """Create the two column table used for run summaries."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Value", style="bold")
    return table


def get_themed_console(icon_mode: str = "emoji", stderr: bool = False) -> ThemedConsole:
    """Get a themed console instance."""
    return ThemedConsole(icon_mode=icon_mode, stderr=stderr)


__all__ = [
    "ARTIFACT_BUILDER_THEME",
    "Icons",
    "ThemedConsole",
    "create_key_value_table",
    "get_themed_console",
]

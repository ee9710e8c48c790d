"""Modal dialog for confirming a full lighting reset."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label


class ResetConfirmationModal(ModalScreen[bool]):
    """Modal dialog asking the user to confirm resetting the surface."""

    DEFAULT_CSS = """
    ResetConfirmationModal {
        align: center middle;
    }

    #dialog {
        width: 50;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    #question {
        width: 100%;
        content-align: center middle;
        padding: 1 0;
        text-style: bold;
    }

    #details {
        width: 100%;
        content-align: center middle;
        padding: 1 0;
        color: $text-muted;
    }

    #button-container {
        width: 100%;
        height: auto;
        align: center middle;
        padding: 1 0;
    }

    #button-container Button {
        margin: 0 1;
        min-width: 12;
    }
    """

    def __init__(self, overrides: int) -> None:
        """
        Initialize the modal.

        Args:
            overrides: Number of painted pixels that will be cleared
        """
        super().__init__()
        self.overrides = overrides

    def compose(self) -> ComposeResult:
        """Create the modal content."""
        with Vertical(id="dialog"):
            yield Label("Reset lighting to defaults?", id="question")
            yield Label(f"{self.overrides} painted pixel(s) will be cleared", id="details")
            with Horizontal(id="button-container"):
                yield Button("Reset", variant="error", id="reset-btn")
                yield Button("Cancel", variant="default", id="cancel-btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "reset-btn":
            event.stop()
            self.dismiss(True)
        elif event.button.id == "cancel-btn":
            event.stop()
            self.dismiss(False)

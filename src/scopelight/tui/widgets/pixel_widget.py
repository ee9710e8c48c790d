"""Widget representing a single LED in the grid."""

from textual.color import Color as TextualColor
from textual.message import Message
from textual.widgets import Static

from scopelight.models import RenderedPixel


class PixelWidget(Static):
    """
    Widget representing a single LED (presentation only).

    The background shows the rendered color at the rendered opacity.
    Painted pixels get the ``override`` class. Clicks are posted as
    messages so the app decides what a click does.
    """

    DEFAULT_CSS = """
    PixelWidget {
        width: 100%;
        height: 100%;
        border: round $surface;
        content-align: center middle;
        color: $text-muted;
    }

    PixelWidget.override {
        border: round $accent;
    }
    """

    class Clicked(Message):
        """Message posted when the pixel is clicked."""

        def __init__(self, index: int):
            super().__init__()
            self.index = index

    def __init__(self, index: int) -> None:
        """
        Initialize pixel widget.

        Args:
            index: Index of this pixel (0-63)
        """
        super().__init__(f"[dim]{index}[/dim]")
        self.index = index
        self._hex: str | None = None
        self._opacity: float | None = None

    @property
    def shown_hex(self) -> str | None:
        """Hex color currently displayed."""
        return self._hex

    @property
    def shown_opacity(self) -> float | None:
        """Opacity currently displayed."""
        return self._opacity

    def show(self, pixel: RenderedPixel, is_override: bool = False) -> None:
        """
        Display a rendered pixel.

        Args:
            pixel: Rendered color and opacity
            is_override: Whether the pixel is manually painted
        """
        hex_color = pixel.to_hex()
        if hex_color != self._hex or pixel.opacity != self._opacity:
            self._hex = hex_color
            self._opacity = pixel.opacity
            self.styles.background = TextualColor.parse(hex_color).with_alpha(pixel.opacity)
        self.set_class(is_override, "override")

    def on_click(self) -> None:
        """Handle click event - post message for parent to handle."""
        self.post_message(self.Clicked(self.index))

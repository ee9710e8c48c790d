"""Grid widget containing 8x8 pixel widgets."""

from collections.abc import Collection

from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message

from scopelight.models import GRID_SIZE, TOTAL_PIXELS, RenderedPixel

from .pixel_widget import PixelWidget


class LedGrid(Container):
    """
    8x8 grid of pixel widgets (layout container).

    Pixels are laid out row-major: index 0 is top-left, index 63 is
    bottom-right. The grid is stateless; each frame is passed in
    explicitly via ``show_frame``.
    """

    DEFAULT_CSS = f"""
    LedGrid {{
        layout: grid;
        grid-size: {GRID_SIZE} {GRID_SIZE};
        grid-gutter: 0;
        padding: 1;
        height: 1fr;
    }}
    """

    class PixelClicked(Message):
        """Message posted when any pixel is clicked."""

        def __init__(self, index: int):
            super().__init__()
            self.index = index

    def __init__(self) -> None:
        """Initialize the grid."""
        super().__init__()
        self.pixel_widgets: dict[int, PixelWidget] = {}

    def compose(self) -> ComposeResult:
        """Create the 64 pixel widgets."""
        for index in range(TOTAL_PIXELS):
            widget = PixelWidget(index)
            self.pixel_widgets[index] = widget
            yield widget

    def show_frame(self, frame: list[RenderedPixel], overrides: Collection[int] = ()) -> None:
        """
        Display a rendered frame.

        Args:
            frame: 64 rendered pixels in index order
            overrides: Indices of manually painted pixels
        """
        for index, pixel in enumerate(frame):
            widget = self.pixel_widgets.get(index)
            if widget is not None:
                widget.show(pixel, index in overrides)

    def on_pixel_widget_clicked(self, message: PixelWidget.Clicked) -> None:
        """Forward clicks from child widgets up to the app."""
        message.stop()
        self.post_message(self.PixelClicked(message.index))

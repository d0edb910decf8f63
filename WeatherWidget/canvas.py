"""Canvas abstraction for the weather card - allows swapping the terminal, images and test backends."""
import io
import logging
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

import requests
from PIL import Image, ImageDraw, ImageFont


class Canvas(ABC):
    """Abstract rendering surface. Every call receives the active text direction."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Get canvas width (characters or pixels, depending on the backend)."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Start a new frame."""
        pass

    @abstractmethod
    def draw_text(self, text: str, style: str, direction: str) -> None:
        """
        Draw one line of text.

        Args:
            text: Text to draw
            style: Role of the line ("city", "time", "temperature", "error", ...)
            direction: "ltr" or "rtl"
        """
        pass

    @abstractmethod
    def draw_progress(self, direction: str) -> None:
        """Draw the loading indicator."""
        pass

    @abstractmethod
    def draw_divider(self, direction: str) -> None:
        pass

    @abstractmethod
    def draw_image(self, url: str, alt: str, direction: str) -> None:
        """Draw the image found at url; alt describes it."""
        pass

    @abstractmethod
    def draw_button(self, label: str, direction: str) -> None:
        pass

    def flush(self) -> None:
        """Present the finished frame. Backends that draw immediately need nothing here."""


class FakeCanvas(Canvas):
    """
    Fake canvas implementation for testing - records every call in memory.
    """

    def __init__(self, width: int = 40):
        self._width = width
        self.calls: List[Tuple[str, str, str, str]] = []
        self.flushed = 0

    @property
    def width(self) -> int:
        return self._width

    def clear(self) -> None:
        self.calls = []

    def draw_text(self, text: str, style: str, direction: str) -> None:
        self.calls.append(("text", text, style, direction))

    def draw_progress(self, direction: str) -> None:
        self.calls.append(("progress", "", "", direction))

    def draw_divider(self, direction: str) -> None:
        self.calls.append(("divider", "", "", direction))

    def draw_image(self, url: str, alt: str, direction: str) -> None:
        self.calls.append(("image", url, alt, direction))

    def draw_button(self, label: str, direction: str) -> None:
        self.calls.append(("button", label, "", direction))

    def flush(self) -> None:
        self.flushed += 1

    def kinds(self) -> List[str]:
        """Kinds of the recorded calls, in order (for testing)."""
        return [call[0] for call in self.calls]

    def texts(self, style: Optional[str] = None) -> List[str]:
        """Text lines drawn, optionally only those with the given style."""
        return [
            call[1] for call in self.calls
            if call[0] == "text" and (style is None or call[2] == style)
        ]


class TerminalCanvas(Canvas):
    """Draws the card as plain text lines; right-to-left lines are right-aligned."""

    def __init__(self, width: int = 48, stream=None):
        self._width = width
        self._stream = stream or sys.stdout
        self._lines: List[str] = []

    @property
    def width(self) -> int:
        return self._width

    def _add(self, text: str, direction: str) -> None:
        if direction == "rtl":
            self._lines.append(text.rjust(self._width))
        else:
            self._lines.append(text)

    def clear(self) -> None:
        self._lines = []

    def draw_text(self, text: str, style: str, direction: str) -> None:
        if style == "error":
            text = f"!! {text}"
        elif style == "city":
            text = text.upper()
        self._add(text, direction)

    def draw_progress(self, direction: str) -> None:
        self._add("...", direction)

    def draw_divider(self, direction: str) -> None:
        self._lines.append("-" * self._width)

    def draw_image(self, url: str, alt: str, direction: str) -> None:
        self._add(f"[{alt}] {url}", direction)

    def draw_button(self, label: str, direction: str) -> None:
        self._add(f"[ {label} ]", direction)

    def flush(self) -> None:
        self._stream.write("\n".join(self._lines) + "\n")
        self._stream.flush()


class PILCanvas(Canvas):
    """
    PIL-based canvas for rendering the card to PNG images.

    Text is laid out top to bottom; right-to-left lines are right-aligned.
    Arabic glyph shaping depends on Pillow being built with libraqm.
    """

    BACKGROUND = (245, 245, 250)
    TEXT_COLOR = (33, 33, 33)
    ERROR_COLOR = (211, 47, 47)
    BUTTON_COLOR = (25, 118, 210)
    FONT_SIZES = {"city": 36, "temperature": 32, "time": 18, "error": 18}

    def __init__(
        self,
        width: int = 480,
        height: int = 360,
        path: Optional[str] = None,
        font_path: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize PIL canvas.

        Args:
            width: Image width in pixels
            height: Image height in pixels
            path: Where flush() saves the PNG (nothing is saved when None)
            font_path: TrueType font to use; Pillow's default font otherwise
            timeout: Timeout for downloading the weather icon
        """
        self._width = width
        self._height = height
        self._path = path
        self._font_path = font_path
        self._timeout = timeout
        self._margin = 16
        self.clear()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self._image = Image.new("RGB", (self._width, self._height), self.BACKGROUND)
        self._draw = ImageDraw.Draw(self._image)
        self._y = self._margin

    def _font(self, size: int):
        if self._font_path:
            try:
                return ImageFont.truetype(self._font_path, size)
            except OSError:
                logging.warning("Could not load font %s, using default", self._font_path)
        return ImageFont.load_default(size=size)

    def _x_for(self, item_width: float, direction: str) -> int:
        if direction == "rtl":
            return int(self._width - self._margin - item_width)
        return self._margin

    def draw_text(self, text: str, style: str, direction: str) -> None:
        size = self.FONT_SIZES.get(style, 16)
        font = self._font(size)
        color = self.ERROR_COLOR if style == "error" else self.TEXT_COLOR
        x = self._x_for(self._draw.textlength(text, font=font), direction)
        self._draw.text((x, self._y), text, fill=color, font=font)
        self._y += size + 8

    def draw_progress(self, direction: str) -> None:
        size = 32
        x = (self._width - size) // 2
        self._draw.arc(
            (x, self._y, x + size, self._y + size),
            start=0,
            end=270,
            fill=self.BUTTON_COLOR,
            width=4
        )
        self._y += size + 8

    def draw_divider(self, direction: str) -> None:
        self._draw.line(
            (self._margin, self._y, self._width - self._margin, self._y),
            fill=self.TEXT_COLOR,
            width=1
        )
        self._y += 8

    def draw_image(self, url: str, alt: str, direction: str) -> None:
        try:
            response = requests.get(url, timeout=self._timeout)
            response.raise_for_status()
            icon = Image.open(io.BytesIO(response.content)).convert("RGBA")
        except (requests.exceptions.RequestException, OSError) as e:
            logging.warning("Skipping weather icon %s: %s", url, e)
            return
        x = self._x_for(icon.width, direction)
        self._image.paste(icon, (x, self._y), icon)
        self._y += icon.height

    def draw_button(self, label: str, direction: str) -> None:
        font = self._font(16)
        text_width = self._draw.textlength(label, font=font)
        box_width = text_width + 24
        x = self._x_for(box_width, direction)
        self._draw.rounded_rectangle(
            (x, self._y, x + box_width, self._y + 32),
            radius=4,
            fill=self.BUTTON_COLOR
        )
        self._draw.text((x + 12, self._y + 8), label, fill=(255, 255, 255), font=font)
        self._y += 40

    def flush(self) -> None:
        if self._path:
            self._image.save(self._path)
            logging.info("Saved weather card to %s", self._path)

    def get_image(self):
        """Get the PIL Image object (for advanced usage)."""
        return self._image

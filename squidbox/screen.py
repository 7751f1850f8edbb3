"""A monochrome 128x64 display held in memory."""

from __future__ import annotations

CHECKMARK_BITMAP = bytes(
    [
        0b00000000,
        0b00000001,
        0b00000010,
        0b00000100,
        0b10001000,
        0b01010000,
        0b00100000,
        0b00000000,
    ]
)

X_BITMAP = bytes(
    [
        0b10000001,
        0b01000010,
        0b00100100,
        0b00011000,
        0b00011000,
        0b00100100,
        0b01000010,
        0b10000001,
    ]
)

CHAR_WIDTH = 6
CHAR_HEIGHT = 8


class Screen:
    """Pixel buffer plus the text written on it.

    Pixels are on or off. Text is kept as characters at the pixel position
    where each was drawn; a character cell is 6 by 8 pixels.
    """

    WIDTH = 128
    HEIGHT = 64

    def __init__(self):
        self._pixels = bytearray(self.WIDTH * self.HEIGHT)
        self._chars = {}
        self.cursor = (0, 0)
        self.frames = 0
        self.shown = bytes(self._pixels)

    def clear(self):
        """Turn every pixel off and remove all text."""
        self._pixels = bytearray(self.WIDTH * self.HEIGHT)
        self._chars.clear()

    def update(self):
        """Show the current buffer."""
        self.shown = bytes(self._pixels)
        self.frames += 1

    def _inside(self, x, y):
        return 0 <= x < self.WIDTH and 0 <= y < self.HEIGHT

    def _set(self, x, y, on):
        if self._inside(x, y):
            self._pixels[y * self.WIDTH + x] = 1 if on else 0

    def pixel(self, x, y):
        """Return whether the pixel at ``(x, y)`` is on; off outside the screen."""
        if not self._inside(x, y):
            return False
        return bool(self._pixels[y * self.WIDTH + x])

    def fill_rect(self, x, y, width, height, on):
        """Fill a rectangle, erasing any text beneath it."""
        if width <= 0 or height <= 0:
            return
        for py in range(max(y, 0), min(y + height, self.HEIGHT)):
            start = py * self.WIDTH
            for px in range(max(x, 0), min(x + width, self.WIDTH)):
                self._pixels[start + px] = 1 if on else 0
        self._chars = {
            (cx, cy): ch
            for (cx, cy), ch in self._chars.items()
            if not (
                cx < x + width
                and cx + CHAR_WIDTH > x
                and cy < y + height
                and cy + CHAR_HEIGHT > y
            )
        }

    def draw_rect(self, x, y, width, height, on):
        """Draw the one-pixel outline of a rectangle."""
        if width <= 0 or height <= 0:
            return
        right, bottom = x + width - 1, y + height - 1
        for px in range(x, x + width):
            self._set(px, y, on)
            self._set(px, bottom, on)
        for py in range(y, y + height):
            self._set(x, py, on)
            self._set(right, py, on)

    def draw_bitmap(self, x, y, bitmap, width, height):
        """Turn on the pixels whose bits are set; rows are bytes, high bit first."""
        byte_width = (width + 7) // 8
        for row in range(height):
            for col in range(width):
                byte = bitmap[row * byte_width + col // 8]
                if byte & (0x80 >> (col % 8)):
                    self._set(x + col, y + row, True)

    def set_cursor(self, x, y):
        """Move the text cursor to pixel position ``(x, y)``."""
        self.cursor = (x, y)

    def write(self, text):
        """Write text at the cursor; an integer is taken as a single character code."""
        if isinstance(text, int):
            text = chr(text)
        x, y = self.cursor
        for ch in text:
            if ch == "\n":
                x, y = 0, y + CHAR_HEIGHT
                continue
            if ch == "\r":
                continue
            if x + CHAR_WIDTH > self.WIDTH:
                x, y = 0, y + CHAR_HEIGHT
            self._chars[(x, y)] = ch
            x += CHAR_WIDTH
        self.cursor = (x, y)

    def text_at(self, row):
        """Return the text on line ``row`` (8 pixels per line), left to right."""
        top = row * CHAR_HEIGHT
        cells = sorted(
            (cx, ch)
            for (cx, cy), ch in self._chars.items()
            if top <= cy < top + CHAR_HEIGHT
        )
        return "".join(ch for _, ch in cells)
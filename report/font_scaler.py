"""Linear mapping from word counts to font sizes."""

# Font size range (CSS classes f11 .. f48)
MINFONT = 11
MAXFONT = 48


def font_shift(max_count: int, min_font: int = MINFONT, max_font: int = MAXFONT) -> int:
    """
    Integer divisor that maps counts onto the font range.

    When max_count is smaller than the range width the shift is 1, so
    counts map one-to-one onto sizes starting at min_font.

    Raises:
        ValueError: If max_count < 1 (empty selection) or the range is empty
    """
    if max_count < 1:
        raise ValueError(f"max_count must be >= 1, got {max_count}")
    if max_font <= min_font:
        raise ValueError(f"Empty font range: {min_font}..{max_font}")
    return max(1, max_count // (max_font - min_font))


def font_size(
    count: int,
    max_count: int,
    min_font: int = MINFONT,
    max_font: int = MAXFONT,
) -> int:
    """Font size for count, clamped to [min_font, max_font]."""
    return FontScaler(max_count, min_font, max_font).size(count)


class FontScaler:
    """Font sizes for one selection of words."""

    def __init__(self, max_count: int, min_font: int = MINFONT, max_font: int = MAXFONT):
        self.max_count = max_count
        self.min_font = min_font
        self.max_font = max_font
        self.shift = font_shift(max_count, min_font, max_font)

    def size(self, count: int) -> int:
        """Font size for count, clamped to [min_font, max_font]."""
        size = count // self.shift + self.min_font
        return max(self.min_font, min(self.max_font, size))

    def __repr__(self) -> str:
        return (
            f"FontScaler(max_count={self.max_count}, "
            f"range={self.min_font}..{self.max_font}, shift={self.shift})"
        )

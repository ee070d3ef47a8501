"""Default configuration for tagcloud."""

import codecs
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from report.font_scaler import MINFONT, MAXFONT


# Stylesheets linked from every generated page
DEFAULT_STYLESHEETS = [
    "https://cse22x1.engineering.osu.edu/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
]


@dataclass
class Config:
    """Application configuration."""

    # Fonts
    min_font: int = MINFONT
    max_font: int = MAXFONT

    # Files
    encoding: str = "utf-8"

    # Output
    stylesheets: list[str] = field(default_factory=lambda: list(DEFAULT_STYLESHEETS))

    def validate(self) -> "Config":
        """Check the font range and encoding, raising ValueError if unusable."""
        if self.min_font < 1:
            raise ValueError(f"min_font must be >= 1, got {self.min_font}")
        if self.max_font <= self.min_font:
            raise ValueError(
                f"max_font ({self.max_font}) must be greater than min_font ({self.min_font})"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e
        return self

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build configuration from environment variables (and .env if present).

        TAGCLOUD_MIN_FONT, TAGCLOUD_MAX_FONT: font range
        TAGCLOUD_ENCODING: encoding for input and output files
        TAGCLOUD_STYLESHEETS: comma-separated stylesheet URLs
        """
        load_dotenv()
        config = cls()

        min_font = os.getenv("TAGCLOUD_MIN_FONT")
        if min_font:
            config.min_font = int(min_font)
        max_font = os.getenv("TAGCLOUD_MAX_FONT")
        if max_font:
            config.max_font = int(max_font)

        config.encoding = os.getenv("TAGCLOUD_ENCODING") or config.encoding

        stylesheets = os.getenv("TAGCLOUD_STYLESHEETS")
        if stylesheets:
            config.stylesheets = [s.strip() for s in stylesheets.split(",") if s.strip()]

        return config

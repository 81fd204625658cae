"""
cloud/config.py

What this file does:
- Holds the tag cloud display settings (font range, stylesheet).
- Loads them from an optional JSON file, e.g.

    {"font_min": 11, "font_max": 48, "css_href": "tagcloud.css"}

How it fits:
- cli.py loads the file (--config) and applies --font-min / --font-max.
- pipeline/build.py passes the values to the scaler and the renderer.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

DEFAULT_CSS_HREF = (
    "http://web.cse.ohio-state.edu/software/"
    "2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css"
)


@dataclass(frozen=True)
class CloudConfig:
    font_min: int = 11
    font_max: int = 48
    css_href: str = DEFAULT_CSS_HREF

    def validate(self) -> "CloudConfig":
        for name in ("font_min", "font_max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Config '{name}' must be an integer, got {value!r}")
        if self.font_min < 1:
            raise ValueError(f"Config 'font_min' must be >= 1, got {self.font_min}")
        if self.font_min > self.font_max:
            raise ValueError(
                f"Config 'font_min' ({self.font_min}) must not exceed 'font_max' ({self.font_max})"
            )
        if not isinstance(self.css_href, str) or not self.css_href.strip():
            raise ValueError("Config 'css_href' must be a non-empty string")
        return self

    def with_overrides(self, **overrides: Any) -> "CloudConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()


def load_config(path: str | Path) -> CloudConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"config file not found: {path}")
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid config in {path}: expected a JSON object.")

    known = {f.name for f in fields(CloudConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}. Allowed: {sorted(known)}")

    return CloudConfig(**payload).validate()

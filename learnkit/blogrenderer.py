"""Posts as seen by the blog renderer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RenderPost:
    """A post ready to be rendered."""

    title: str = ""
    description: str = ""
    body: str = ""
    tags: list[str] = field(default_factory=list)

    def sanitised_title(self) -> str:
        """Return the title in lower case with spaces turned into hyphens."""
        return self.title.replace(" ", "-").lower()
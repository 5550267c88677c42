"""Inline styles for the image wrapper, main image and placeholder.

Styles are built as ordered property maps and serialized to ``prop:value``
pairs joined by ``;``. The same inputs always produce the same strings.
"""

from pydantic import BaseModel, ConfigDict

from .common.schemas import Layout, Loading

FADE_TRANSITION = "opacity 500ms linear"

_OVERLAY: dict[str, str] = {
    "position": "absolute",
    "top": "0",
    "right": "0",
    "bottom": "0",
    "left": "0",
    "width": "100%",
    "height": "100%",
    "margin": "0",
    "padding": "0",
    "max-width": "none",
    "object-fit": "cover",
}


def to_css(declarations: dict[str, str]) -> str:
    return ";".join(f"{prop}:{value}" for prop, value in declarations.items())


class ImageStyles(BaseModel):
    """Styles resolved for one layout, background color and geometry."""

    layout: str
    background_color: str
    width: int
    height: int

    model_config = ConfigDict(frozen=True)

    def wrapper(self) -> str:
        """Positioning context sized to keep the aspect ratio of the image."""
        declarations = {"position": "relative", "overflow": "hidden"}

        if self.layout == Layout.FIXED:
            declarations["width"] = f"{self.width}px"
            declarations["height"] = f"{self.height}px"
        elif self.layout == Layout.CONSTRAINED:
            declarations["display"] = "inline-block"
            declarations["max-width"] = f"{self.width}px"
            declarations["width"] = "100%"
            declarations["aspect-ratio"] = f"{self.width}/{self.height}"
        elif self.layout == Layout.FULL_WIDTH:
            declarations["width"] = "100%"
            declarations["aspect-ratio"] = f"{self.width}/{self.height}"

        declarations["background-color"] = self.background_color
        return to_css(declarations)

    def main(self, loading: str = Loading.LAZY) -> str:
        """Image element style. Lazy images stay hidden until loaded."""
        declarations = dict(_OVERLAY)
        if loading == Loading.LAZY:
            declarations["opacity"] = "0"
            declarations["transition"] = FADE_TRANSITION
        else:
            declarations["opacity"] = "1"
        return to_css(declarations)

    def placeholder(self) -> str:
        declarations = dict(_OVERLAY)
        declarations["background-color"] = self.background_color
        declarations["opacity"] = "1"
        declarations["transition"] = FADE_TRANSITION
        return to_css(declarations)


def resolve_styles(layout: str, background_color: str, width: int, height: int) -> ImageStyles:
    return ImageStyles(
        layout=layout,
        background_color=background_color,
        width=width,
        height=height,
    )

"""Theme lookup by semantic role: heading tiers, body text and colors."""

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict

from mdcompose.styled.styles import Color, FontWeight, TextStyle


class ThemeName(StrEnum):
    LIGHT = auto()
    DARK = auto()


class Typography(BaseModel):
    model_config = ConfigDict(frozen=True)

    h1: TextStyle = TextStyle(font_size=96, font_weight=FontWeight.LIGHT)
    h2: TextStyle = TextStyle(font_size=60, font_weight=FontWeight.LIGHT)
    h3: TextStyle = TextStyle(font_size=48, font_weight=FontWeight.NORMAL)
    h4: TextStyle = TextStyle(font_size=34, font_weight=FontWeight.NORMAL)
    h5: TextStyle = TextStyle(font_size=24, font_weight=FontWeight.NORMAL)
    h6: TextStyle = TextStyle(font_size=20, font_weight=FontWeight.MEDIUM)
    body1: TextStyle = TextStyle(font_size=16, font_weight=FontWeight.NORMAL)


class Colors(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: Color
    background: Color
    on_background: Color


class Theme(BaseModel):
    model_config = ConfigDict(frozen=True)

    typography: Typography = Typography()
    colors: Colors

    def heading_style(self, level: int) -> TextStyle | None:
        """Style tier for heading levels 1-6, None for anything else."""
        if not 1 <= level <= 6:
            return None
        return getattr(self.typography, f"h{level}")


def light_theme() -> Theme:
    return Theme(colors=Colors(primary="#6200EE", background="#FFFFFF", on_background="#000000"))


def dark_theme() -> Theme:
    return Theme(colors=Colors(primary="#BB86FC", background="#121212", on_background="#FFFFFF"))


def get_theme(name: ThemeName) -> Theme:
    match name:
        case ThemeName.LIGHT:
            return light_theme()
        case ThemeName.DARK:
            return dark_theme()

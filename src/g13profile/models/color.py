"""Color model for the G13 backlight."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Profiles write colors as a three item array (``rgb = [255, 0, 0]``);
    the model accepts that form as well as ``{r, g, b}`` mappings.

    The model is frozen so a loaded profile can never be changed.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @model_validator(mode="before")
    @classmethod
    def from_sequence(cls, data: Any) -> Any:
        """Accept ``[r, g, b]`` as written in profile files."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise ValueError(f"rgb needs exactly 3 values, got {len(data)}")
            r, g, b = data
            return {"r": r, "g": g, "b": b}
        return data

    @classmethod
    def red(cls) -> "Color":
        """Default backlight color."""
        return cls(r=255, g=0, b=0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

"""Layer extent schema."""

from pydantic import BaseModel, model_validator


class BoundingBox(BaseModel):
    """Axis-aligned extent of a layer's coordinates."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @model_validator(mode="after")
    def check_ordering(self) -> "BoundingBox":
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError("min coordinates must not exceed max coordinates")
        return self

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

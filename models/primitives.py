"""
Shared primitive data types.

Basic geometric types used by the snapshot models and the presentation
layer. Simulation code works on plain bounds tuples for speed and converts
to these models only when publishing state.
"""

from pydantic import BaseModel, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and velocities.

    Attributes:
        x: X coordinate (horizontal, pixels, grows rightwards)
        y: Y coordinate (vertical, pixels, grows downwards)

    Examples:
        >>> pos = Point2D(x=288.0, y=480.0)
        >>> vel = Point2D(x=-8.0, y=0.0)  # Moving left
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Velocities read better as vectors
Vector2D = Point2D


class Rectangle(BaseModel):
    """Immutable rectangle defined by position and dimensions.

    Position is at top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> rect = Rectangle(x=32.0, y=32.0, width=32.0, height=32.0)
        >>> rect.center
        Point2D(x=48.00, y=48.00)
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def center(self) -> Point2D:
        """Center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: 'Rectangle') -> bool:
        """Check whether two rectangles overlap.

        Touching edges do not count: the overlap must have positive area.

        Examples:
            >>> a = Rectangle(x=0.0, y=0.0, width=32.0, height=32.0)
            >>> a.intersects(Rectangle(x=32.0, y=0.0, width=32.0, height=32.0))
            False
        """
        return (self.x < other.right and other.x < self.right and
                self.y < other.bottom and other.y < self.bottom)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"

"""Stamp placement value objects and print-area derivation."""

from pydantic import BaseModel, ConfigDict, Field

# Base print region of a garment front, in centimetres
BASE_PRINT_WIDTH_CM = 30.0
BASE_PRINT_HEIGHT_CM = 40.0
DEFAULT_PRINT_POSITION = "center-front"


class Vector3(BaseModel):
    """A 3D vector."""

    x: float
    y: float
    z: float

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)


class Transforms(BaseModel):
    """Position, rotation and scale of a stamp on the garment model."""

    position: Vector3
    rotation: Vector3
    scale: Vector3

    model_config = ConfigDict(frozen=True, extra="forbid")


class PrintArea(BaseModel):
    """Physical dimensions of the printed stamp region."""

    width: float = Field(description="Print width in cm")
    height: float = Field(description="Print height in cm")
    position: str = Field(description="Named placement on the garment")

    model_config = ConfigDict(frozen=True)


def calculate_print_area(transforms: Transforms) -> PrintArea:
    """Scale the fixed base print region by the stamp's x/y scale.

    Rotation and z scale are ignored and no clamping is applied; every
    product shares the same base region.
    """
    return PrintArea(
        width=BASE_PRINT_WIDTH_CM * transforms.scale.x,
        height=BASE_PRINT_HEIGHT_CM * transforms.scale.y,
        position=DEFAULT_PRINT_POSITION,
    )

"""Tests for transform value objects and print-area derivation."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from stamp_studio.domain.transforms import (
    BASE_PRINT_HEIGHT_CM,
    BASE_PRINT_WIDTH_CM,
    PrintArea,
    Transforms,
    Vector3,
    calculate_print_area,
)


def _transforms(sx: float, sy: float, sz: float = 1.0, rz: float = 0.0) -> Transforms:
    return Transforms(
        position=Vector3(x=0.0, y=0.0, z=0.0),
        rotation=Vector3(x=0.0, y=0.0, z=rz),
        scale=Vector3(x=sx, y=sy, z=sz),
    )


class TestCalculatePrintArea:
    def test_base_region_at_unit_scale(self):
        area = calculate_print_area(_transforms(1.0, 1.0))

        assert area == PrintArea(width=30.0, height=40.0, position="center-front")

    def test_width_doubles_with_x_scale(self):
        area = calculate_print_area(_transforms(2.0, 1.0))

        assert area.width == 60
        assert area.height == 40
        assert area.position == "center-front"

    def test_linear_in_scale(self):
        area = calculate_print_area(_transforms(0.5, 1.5))

        assert area.width == pytest.approx(BASE_PRINT_WIDTH_CM * 0.5)
        assert area.height == pytest.approx(BASE_PRINT_HEIGHT_CM * 1.5)

    def test_rotation_and_z_scale_are_ignored(self):
        plain = calculate_print_area(_transforms(1.2, 0.8))
        rotated = calculate_print_area(_transforms(1.2, 0.8, sz=7.0, rz=45.0))

        assert plain == rotated

    def test_no_clamping(self):
        area = calculate_print_area(_transforms(10.0, 10.0))

        assert area.width == 300
        assert area.height == 400


class TestTransforms:
    def test_is_immutable(self):
        t = _transforms(1.0, 1.0)

        with pytest.raises(PydanticValidationError):
            t.scale = Vector3(x=2.0, y=2.0, z=2.0)  # type: ignore[misc]

    def test_rejects_missing_axis(self):
        with pytest.raises(PydanticValidationError):
            Transforms.model_validate(
                {
                    "position": {"x": 0, "y": 0},
                    "rotation": {"x": 0, "y": 0, "z": 0},
                    "scale": {"x": 1, "y": 1, "z": 1},
                }
            )

    def test_rejects_unknown_keys(self):
        with pytest.raises(PydanticValidationError):
            Vector3.model_validate({"x": 0, "y": 0, "z": 0, "w": 1})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_components(self, value):
        with pytest.raises(PydanticValidationError):
            Vector3(x=value, y=0.0, z=0.0)

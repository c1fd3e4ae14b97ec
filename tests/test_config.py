import pytest

from flowfield.config import NavigationConfig, eight_way_config
from flowfield.grid import EIGHT_WAY_DIRECTIONS, FOUR_WAY_DIRECTIONS


def test_eight_way_config_values():
    config = eight_way_config(10, 8)
    assert config.grid_width == 10
    assert config.grid_height == 8
    assert config.directions == EIGHT_WAY_DIRECTIONS
    assert config.diagonal_cost == 1.4
    assert config.allow_corner_cutting is True


def test_eight_way_config_validates():
    config = eight_way_config(3, 3)
    config.validate()
    assert config.grid_width == 3


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"grid_width": 0, "grid_height": 5}, "grid dimensions must be positive"),
        ({"grid_width": 5, "grid_height": -1}, "grid dimensions must be positive"),
        ({"grid_width": 5, "grid_height": 5, "directions": ()}, "must have at least one direction"),
        ({"grid_width": 5, "grid_height": 5, "diagonal_cost": 0}, "diagonal cost must be positive"),
    ],
)
def test_validate_rejects_bad_settings(kwargs, message):
    with pytest.raises(ValueError, match=message):
        NavigationConfig(**kwargs).validate()


def test_four_way_config_is_accepted():
    config = NavigationConfig(2, 2, directions=FOUR_WAY_DIRECTIONS)
    config.validate()
    assert config.directions == FOUR_WAY_DIRECTIONS
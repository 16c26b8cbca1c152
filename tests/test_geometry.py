"""
Tests for coordinate geometries.
"""

import pytest
from delay_coord.geometry import CoordinateGeometry, ForwardDelayCoordinates


class TestForwardDelayCoordinates:
    """Index law of the forward (newest-first) geometry."""

    @pytest.mark.parametrize("dimension,delay,expected", [
        (3, 2, 5),
        (2, 5, 6),
        (1, 7, 1),
        (4, 1, 4),
        (5, 0, 1),
        (0, 3, 0),
    ])
    def test_window_size(self, dimension, delay, expected):
        assert ForwardDelayCoordinates(dimension, delay).window_size == expected

    def test_map_coord_newest_first(self):
        g = ForwardDelayCoordinates(dimension = 3, delay = 2)
        assert [g.map_coord(i) for i in range(3)] == [4, 2, 0]

    @pytest.mark.parametrize("dimension", [1, 2, 3, 6])
    @pytest.mark.parametrize("delay", [1, 2, 5])
    def test_map_coord_in_range_and_injective(self, dimension, delay):
        g = ForwardDelayCoordinates(dimension, delay)
        offsets = [g.map_coord(i) for i in range(dimension)]
        assert all(0 <= o < g.window_size for o in offsets)
        assert len(set(offsets)) == dimension
        assert offsets[0] == g.window_size - 1
        assert offsets[-1] == 0

    @pytest.mark.parametrize("index", [3, 4, 100, -1])
    def test_map_coord_out_of_range(self, index):
        g = ForwardDelayCoordinates(dimension = 3, delay = 2)
        assert g.map_coord(index) is None

    def test_zero_delay_collapses(self):
        g = ForwardDelayCoordinates(dimension = 4, delay = 0)
        assert [g.map_coord(i) for i in range(4)] == [0, 0, 0, 0]

    def test_zero_dimension_has_no_coordinates(self):
        g = ForwardDelayCoordinates(dimension = 0, delay = 2)
        assert g.map_coord(0) is None


class TestGeometryContract:
    """Construction and value semantics shared by all geometries."""

    def test_abstract_base(self):
        with pytest.raises(TypeError):
            CoordinateGeometry(3, 2)

    @pytest.mark.parametrize("dimension,delay", [(-1, 1), (2, -3)])
    def test_negative_parameters_rejected(self, dimension, delay):
        with pytest.raises(ValueError):
            ForwardDelayCoordinates(dimension, delay)

    @pytest.mark.parametrize("dimension,delay", [(2.0, 1), (2, "1"), (True, 1)])
    def test_non_integer_parameters_rejected(self, dimension, delay):
        with pytest.raises(TypeError):
            ForwardDelayCoordinates(dimension, delay)

    def test_value_object(self):
        a = ForwardDelayCoordinates(3, 2)
        assert a == ForwardDelayCoordinates(dimension = 3, delay = 2)
        assert a != ForwardDelayCoordinates(3, 1)
        assert hash(a) == hash(ForwardDelayCoordinates(3, 2))
        with pytest.raises(AttributeError):
            a.delay = 4

    def test_custom_variant_plugs_into_mapping(self):
        """A new index law reuses the windowing machinery unchanged."""

        class BackwardDelayCoordinates(CoordinateGeometry):
            def map_coord(self, index):
                if index < 0 or index >= self.dimension:
                    return None
                return index * self.delay

        g = BackwardDelayCoordinates(dimension = 3, delay = 2)
        points = [v.to_list() for v in g.mapping_iter(list(range(7)))]
        assert points == [[0, 2, 4], [1, 3, 5], [2, 4, 6]]

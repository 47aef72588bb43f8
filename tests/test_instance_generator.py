import math

import pytest

from config.instance_generator import (
    INSTANCE_PRESETS,
    InstanceConfig,
    describe_instance,
    generate_cities,
    generate_convex_polygon,
)


@pytest.mark.parametrize("name", sorted(INSTANCE_PRESETS))
def test_presets_produce_cities_inside_the_area(name):
    config = INSTANCE_PRESETS[name]
    cities = generate_cities(config)

    assert len(cities) == config.num_cities
    assert [city.city_id for city in cities] == list(range(config.num_cities))
    for city in cities:
        assert 0.0 <= city.x <= config.width
        assert 0.0 <= city.y <= config.height
        if config.integer_coordinates:
            assert city.x.is_integer() and city.y.is_integer()


def test_seed_determinism():
    config = InstanceConfig(num_cities=15, seed=123)

    first = [city.coordinates for city in generate_cities(config)]
    second = [city.coordinates for city in generate_cities(config)]
    other = [city.coordinates for city in generate_cities(InstanceConfig(num_cities=15, seed=124))]

    assert first == second
    assert first != other


def test_real_valued_coordinates():
    cities = generate_cities(InstanceConfig(num_cities=20, integer_coordinates=False, seed=3))

    assert any(not city.x.is_integer() for city in cities)


def test_convex_polygon_lies_on_the_circle():
    cities = generate_convex_polygon(8, radius=10.0, center=(5.0, -5.0))

    assert len(cities) == 8
    for city in cities:
        assert math.hypot(city.x - 5.0, city.y + 5.0) == pytest.approx(10.0)
    assert cities[0].coordinates == pytest.approx((15.0, -5.0))


def test_negative_sizes_are_rejected():
    with pytest.raises(ValueError):
        generate_cities(InstanceConfig(num_cities=-1))
    with pytest.raises(ValueError):
        generate_convex_polygon(-3)


def test_describe_instance():
    text = describe_instance(InstanceConfig(num_cities=5, width=10.0, height=20.0, seed=9))

    assert text == "5 cities, integer coordinates in 10 x 20, seed=9"

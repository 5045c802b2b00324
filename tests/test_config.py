import pytest

from landuse.cells import CellType

from landuse.roles import Empty, Landmark, Agent

from landuse.grid import Grid

from landuse.config import LandUseConfig, AnnealingSchedule

from landuse.exceptions import \
    ConfigurationError, InvalidGridError, InvalidPreferencesError, \
    InvalidScheduleError, InsufficientAgentsError, InvalidPercentagesError

T = CellType.TRANSPORT
P = CellType.PUBLIC
R = CellType.RESIDENTIAL
O = CellType.OFFICE


def test_roles(mixed_config):
    assert mixed_config.role(CellType.EMPTY) is Empty
    assert mixed_config.role(T) is Landmark
    assert mixed_config.role(CellType.ROAD) is Landmark
    assert mixed_config.role(R) is Agent
    assert mixed_config.role(O) is Agent

    # Raw integers (as found in grid arrays) should also work
    assert mixed_config.role(int(R)) is Agent

    # Kinds not mentioned by the configuration have no role
    with pytest.raises(KeyError):
        mixed_config.role(P)

    assert mixed_config.is_agent(R)
    assert not mixed_config.is_agent(T)
    assert not mixed_config.is_agent(P)
    assert mixed_config.is_landmark(T)
    assert not mixed_config.is_landmark(R)
    assert not mixed_config.is_landmark(CellType.EMPTY)


def test_preferences(mixed_config):
    assert mixed_config.landmark_kinds == (T, CellType.ROAD)
    assert mixed_config.agent_kinds == (R, O)
    assert mixed_config.weights(R) == (1.0, -2.0)
    assert mixed_config.preference(R, CellType.ROAD) == -2.0
    assert mixed_config.preference(O, T) == 3.0
    assert mixed_config.landmark_index(CellType.ROAD) == 1

    # The preference table handed out is a copy
    mixed_config.preferences[R] = (0, 0)
    assert mixed_config.weights(R) == (1.0, -2.0)


def test_equality():
    a = LandUseConfig([T], [R], {R: (1,)})
    b = LandUseConfig([T], [R], {R: (1.0,)})
    c = LandUseConfig([T], [R], {R: (2,)})
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


@pytest.mark.parametrize("landmarks,agents,preferences", [
    # Missing kinds
    ([], [R], {R: ()}),
    ([T], [], {}),
    # EMPTY may not be given a role
    ([CellType.EMPTY], [R], {R: (1,)}),
    ([T], [CellType.EMPTY], {CellType.EMPTY: (1,)}),
    # Kinds may not be repeated or overlap
    ([T, T], [R], {R: (1, 1)}),
    ([T], [R, R], {R: (1,)}),
    ([T, R], [R], {R: (1, 1)}),
    # Every agent needs a preference vector of the right length
    ([T], [R, O], {R: (1,)}),
    ([T], [R], {R: (1,), O: (1,)}),
    ([T, P], [R], {R: (1,)}),
    ([T], [R], {R: (1, 2)}),
    # Unknown kinds and non-numeric weights
    ([42], [R], {R: (1,)}),
    ([T], [42], {42: (1,)}),
    ([T], [R], {R: (1,), 42: (1,)}),
    ([T], [R], {R: ("near",)}),
    ([T], [R], {R: (None,)}),
])
def test_bad_config(landmarks, agents, preferences):
    with pytest.raises(InvalidPreferencesError):
        LandUseConfig(landmarks, agents, preferences)


def test_validate_grid(simple_config):
    grid = Grid(2, 2, R)
    grid[0, 0] = T
    simple_config.validate_grid(grid)

    # Empty cells are only sometimes OK
    grid[0, 1] = CellType.EMPTY
    simple_config.validate_grid(grid)
    with pytest.raises(InvalidGridError):
        simple_config.validate_grid(grid, allow_empty=False)

    # Unknown kinds are never OK
    grid[0, 1] = O
    with pytest.raises(InvalidGridError) as excinfo:
        simple_config.validate_grid(grid)
    assert "(0, 1)" in str(excinfo.value)
    assert "OFFICE" in str(excinfo.value)


def test_schedule_defaults():
    schedule = AnnealingSchedule()
    assert schedule.initial_temperature == 1000.0
    assert schedule.final_temperature == 1.0
    assert schedule.cooling_rate == 0.003
    assert schedule == AnnealingSchedule(1000, 1, 0.003)
    assert schedule != AnnealingSchedule(1000, 1, 0.004)


def test_schedule_temperatures():
    schedule = AnnealingSchedule(8.0, 1.0, 0.5)
    assert list(schedule.temperatures()) == [8.0, 4.0, 2.0]

    # A near-instant schedule visits just one temperature
    assert list(AnnealingSchedule(1.0, 0.99, 0.01).temperatures()) == [1.0]


@pytest.mark.parametrize("initial,final,cooling_rate", [
    # Cooling rate out of range
    (10.0, 1.0, 0.0),
    (10.0, 1.0, 1.0),
    (10.0, 1.0, -0.1),
    (10.0, 1.0, 1.5),
    # Would never run
    (1.0, 1.0, 0.1),
    (1.0, 10.0, 0.1),
    # Would never terminate
    (10.0, 0.0, 0.1),
    (10.0, -1.0, 0.1),
    (float("inf"), 1.0, 0.1),
    # Non-finite temperatures
    (float("nan"), 1.0, 0.1),
    (10.0, float("nan"), 0.1),
    (float("inf"), float("inf"), 0.1),
])
def test_bad_schedule(initial, final, cooling_rate):
    with pytest.raises(InvalidScheduleError):
        AnnealingSchedule(initial, final, cooling_rate)


def test_errors_are_configuration_errors():
    for exc in (InvalidGridError, InvalidPreferencesError,
                InvalidScheduleError, InsufficientAgentsError,
                InvalidPercentagesError):
        assert issubclass(exc, ConfigurationError)

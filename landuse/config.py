"""Immutable descriptions of a land use problem and an annealing schedule.

A :py:class:`LandUseConfig` says which :py:class:`~landuse.cells.CellType`
values are landmarks, which are agents and how much each agent type likes
being close to each landmark type. An :py:class:`AnnealingSchedule` describes
the temperature schedule used by :py:func:`landuse.anneal.optimise`.

Both objects validate themselves on construction so that badly formed
problems are reported before any optimisation is attempted.
"""

import math

import numpy as np

from landuse.cells import CellType

from landuse.roles import Empty, Landmark, Agent

from landuse.exceptions import \
    InvalidGridError, InvalidPreferencesError, InvalidScheduleError


def _cell_types(kinds):
    """For internal use. Convert a sequence of kinds into a tuple of
    :py:class:`~landuse.cells.CellType`.
    """
    try:
        return tuple(CellType(k) for k in kinds)
    except ValueError as e:
        raise InvalidPreferencesError(str(e))


class LandUseConfig(object):
    """The roles of cell types and the preferences of agents.

    Attributes
    ----------
    landmark_kinds : (:py:class:`~landuse.cells.CellType`, ...)
        The fixed land uses, in the order used by every preference vector and
        by :py:func:`~landuse.distance.compute_distance_maps`.
    agent_kinds : (:py:class:`~landuse.cells.CellType`, ...)
        The movable land uses.
    preferences : {agent_kind: (weight, ...), ...}
        For every agent kind, one signed weight per landmark kind. Positive
        weights attract an agent towards a landmark kind, negative weights
        repel it.
    """

    __slots__ = ["_landmark_kinds", "_agent_kinds", "_preferences", "_roles"]

    def __init__(self, landmark_kinds, agent_kinds, preferences):
        landmark_kinds = _cell_types(landmark_kinds)
        agent_kinds = _cell_types(agent_kinds)

        if len(landmark_kinds) == 0 or len(agent_kinds) == 0:
            raise InvalidPreferencesError(
                "At least one landmark kind and one agent kind are required.")
        if CellType.EMPTY in landmark_kinds or CellType.EMPTY in agent_kinds:
            raise InvalidPreferencesError(
                "EMPTY cannot be used as a landmark or agent kind.")
        if len(set(landmark_kinds)) != len(landmark_kinds):
            raise InvalidPreferencesError(
                "Duplicate landmark kinds in {}".format(landmark_kinds))
        if len(set(agent_kinds)) != len(agent_kinds):
            raise InvalidPreferencesError(
                "Duplicate agent kinds in {}".format(agent_kinds))
        overlap = set(landmark_kinds) & set(agent_kinds)
        if overlap:
            raise InvalidPreferencesError(
                "Kinds {} are both landmarks and agents.".format(
                    sorted(k.name for k in overlap)))

        # Every agent needs exactly one weight per landmark kind
        missing = [k for k in agent_kinds if k not in preferences]
        if missing:
            raise InvalidPreferencesError(
                "No preferences given for agent kinds {}".format(
                    [k.name for k in missing]))
        extra = [k for k in preferences if k not in agent_kinds]
        if extra:
            raise InvalidPreferencesError(
                "Preferences given for unknown agent kinds {}".format(extra))
        self._preferences = {}
        for kind in agent_kinds:
            try:
                weights = tuple(float(w) for w in preferences[kind])
            except (TypeError, ValueError):
                raise InvalidPreferencesError(
                    "Preferences for {} must be numbers, not {!r}".format(
                        kind.name, preferences[kind]))
            if len(weights) != len(landmark_kinds):
                raise InvalidPreferencesError(
                    "{} has {} preferences but there are {} landmark "
                    "kinds.".format(kind.name, len(weights),
                                    len(landmark_kinds)))
            self._preferences[kind] = weights

        self._landmark_kinds = landmark_kinds
        self._agent_kinds = agent_kinds

        self._roles = {CellType.EMPTY: Empty}
        self._roles.update((k, Landmark) for k in landmark_kinds)
        self._roles.update((k, Agent) for k in agent_kinds)

    @property
    def landmark_kinds(self):
        return self._landmark_kinds

    @property
    def agent_kinds(self):
        return self._agent_kinds

    @property
    def preferences(self):
        return self._preferences.copy()

    def role(self, kind):
        """Get the role played by a cell type.

        Returns
        -------
        :py:data:`~landuse.roles.Empty`, :py:data:`~landuse.roles.Landmark` \
        or :py:data:`~landuse.roles.Agent`

        Raises
        ------
        KeyError
            If the kind is neither EMPTY nor one of the configured kinds.
        """
        return self._roles[kind]

    def is_agent(self, kind):
        return self._roles.get(kind) is Agent

    def is_landmark(self, kind):
        return self._roles.get(kind) is Landmark

    def landmark_index(self, kind):
        return self._landmark_kinds.index(kind)

    def weights(self, agent_kind):
        """The preference vector of an agent kind, in landmark kind order."""
        return self._preferences[agent_kind]

    def preference(self, agent_kind, landmark_kind):
        """The weight an agent kind places on proximity to a landmark kind."""
        return self._preferences[agent_kind][self.landmark_index(landmark_kind)]

    def validate_grid(self, grid, allow_empty=True):
        """Check that every cell of a grid holds a kind this configuration
        knows about.

        Parameters
        ----------
        grid : :py:class:`~landuse.grid.Grid`
        allow_empty : bool
            If False, EMPTY cells are also rejected (e.g. before annealing when
            every cell must have been assigned a land use).

        Raises
        ------
        InvalidGridError
        """
        valid = [int(k) for k in self._roles
                 if allow_empty or k is not CellType.EMPTY]
        bad = ~np.isin(grid.cells, valid)
        if bad.any():
            row, col = (int(v) for v in np.argwhere(bad)[0])
            raise InvalidGridError(
                "Cell {} holds {} which is not valid here.".format(
                    (row, col), CellType(grid.cells[row, col]).name))

    def __eq__(self, other):
        return (isinstance(other, LandUseConfig) and
                self._landmark_kinds == other._landmark_kinds and
                self._agent_kinds == other._agent_kinds and
                self._preferences == other._preferences)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self._landmark_kinds, self._agent_kinds))

    def __repr__(self):
        return "<{} landmarks={} agents={}>".format(
            self.__class__.__name__,
            [k.name for k in self._landmark_kinds],
            [k.name for k in self._agent_kinds])


class AnnealingSchedule(object):
    """A geometric cooling schedule.

    The temperature starts at ``initial_temperature`` and is multiplied by
    ``(1 - cooling_rate)`` after every swap attempt until it is no longer
    greater than ``final_temperature``.

    Attributes
    ----------
    initial_temperature : float
    final_temperature : float
        Must be positive and below ``initial_temperature``.
    cooling_rate : float
        Strictly between 0.0 and 1.0.
    """

    __slots__ = ["_initial_temperature", "_final_temperature",
                 "_cooling_rate"]

    def __init__(self, initial_temperature=1000.0, final_temperature=1.0,
                 cooling_rate=0.003):
        initial_temperature = float(initial_temperature)
        final_temperature = float(final_temperature)
        cooling_rate = float(cooling_rate)

        if not (math.isfinite(initial_temperature) and
                math.isfinite(final_temperature)):
            raise InvalidScheduleError(
                "Temperatures must be finite, not {} and {}".format(
                    initial_temperature, final_temperature))
        if not 0.0 < cooling_rate < 1.0:
            raise InvalidScheduleError(
                "Cooling rate must be between 0 and 1 (exclusive), "
                "not {}".format(cooling_rate))
        if final_temperature <= 0.0:
            raise InvalidScheduleError(
                "Final temperature must be positive, not {}".format(
                    final_temperature))
        if initial_temperature <= final_temperature:
            raise InvalidScheduleError(
                "Initial temperature {} must exceed the final temperature "
                "{}".format(initial_temperature, final_temperature))

        self._initial_temperature = initial_temperature
        self._final_temperature = final_temperature
        self._cooling_rate = cooling_rate

    @property
    def initial_temperature(self):
        return self._initial_temperature

    @property
    def final_temperature(self):
        return self._final_temperature

    @property
    def cooling_rate(self):
        return self._cooling_rate

    def temperatures(self):
        """Generate the sequence of temperatures visited by the schedule."""
        temperature = self._initial_temperature
        while temperature > self._final_temperature:
            yield temperature
            temperature *= 1.0 - self._cooling_rate

    def __eq__(self, other):
        return (isinstance(other, AnnealingSchedule) and
                self._initial_temperature == other._initial_temperature and
                self._final_temperature == other._final_temperature and
                self._cooling_rate == other._cooling_rate)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self._initial_temperature, self._final_temperature,
                     self._cooling_rate))

    def __repr__(self):
        return "{}({!r}, {!r}, {!r})".format(
            self.__class__.__name__, self._initial_temperature,
            self._final_temperature, self._cooling_rate)

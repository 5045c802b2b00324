"""Exceptions raised when a problem is badly specified.

The optimisation itself cannot fail; every error here indicates a violated
precondition which is reported before any work is done.
"""


class ConfigurationError(Exception):
    """Indication that a grid, preference table or schedule is unusable."""
    pass


class InvalidGridError(ConfigurationError):
    """Indication that a grid has bad dimensions or contains cells which are
    not valid for the configuration it is used with.
    """
    pass


class InvalidPreferencesError(ConfigurationError):
    """Indication that the landmark/agent kind lists or the preference table
    are inconsistent.
    """
    pass


class InvalidScheduleError(ConfigurationError):
    """Indication that an annealing schedule would never run or never
    terminate.
    """
    pass


class InsufficientAgentsError(ConfigurationError):
    """Indication that too few agent cells exist for any swap to be made."""
    pass


class InvalidPercentagesError(ConfigurationError):
    """Indication that a table of agent percentages cannot be realised."""
    pass

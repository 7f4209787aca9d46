from __future__ import annotations


class SnooWordsError(Exception):
    """Base class for all domain/service errors."""


# -------------------------
# Generic
# -------------------------

class NotFound(SnooWordsError):
    """Requested entity was not found."""


class ValidationError(SnooWordsError):
    """Input failed validation."""


class ConflictError(SnooWordsError):
    """Operation conflicts with current state."""


# -------------------------
# Rounds / scoring
# -------------------------

class RoundNotFound(NotFound):
    """No round exists with the given id."""


class RoundNotActive(ConflictError):
    """The round is not in a state that accepts this action."""


class UnknownGameMode(ValidationError):
    """Game mode id is not one of GAME_MODES."""


class UnknownScoringPolicy(ValidationError):
    """Scoring policy name is not registered."""


class RoundAlreadyActive(ConflictError):
    """The round is already in progress."""

"""Exceptions raised by the Conquest rules layer."""

from __future__ import annotations


class ConquestError(Exception):
    """Base class for every game error."""


class RegistryInitError(ConquestError):
    """The territory registry could not be built; the game cannot start."""


class InvalidSelectionError(ConquestError):
    """A territory index is out of range or attacker and defender coincide."""


class MalformedInputError(ConquestError):
    """Non-numeric input where a number was expected."""


class MissionError(ConquestError):
    """No mission target can be drawn for the player."""

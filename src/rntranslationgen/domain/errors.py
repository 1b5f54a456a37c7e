from __future__ import annotations

"""
Generation Error Taxonomy.

Every fatal condition of a generation run is raised as a subclass of
TranslationGenError. The `kind` attribute is a stable identifier that the
pipeline copies into its result so interfaces can report it without
inspecting exception types.
"""


class TranslationGenError(Exception):
    """Base class for all fatal generation conditions."""

    kind: str = "GenerationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingConfigurationError(TranslationGenError):
    """A required option is absent after CLI and config file resolution."""

    kind = "MissingConfiguration"


class DirectoryNotFoundError(TranslationGenError):
    """The declared input or output directory does not exist."""

    kind = "DirectoryNotFound"


class NoInputFoundError(TranslationGenError):
    """The input directory holds no translation document."""

    kind = "NoInputFound"


class MalformedInputError(TranslationGenError):
    """The translation document could not be parsed as a keyed tree."""

    kind = "MalformedInput"


class InvalidKeyNameError(TranslationGenError):
    """A key name is empty or contains the path separator."""

    kind = "InvalidKeyName"


class InvalidOutputModeError(TranslationGenError):
    kind = "InvalidOutputMode"


class DriftMismatchError(TranslationGenError):
    """Committed artifacts differ from a fresh generation."""

    kind = "DriftMismatch"


class ExternalToolMissingError(TranslationGenError):
    kind = "ExternalToolMissing"

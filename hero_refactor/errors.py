"""Exception hierarchy for hero-refactor.

Errors fall into two tiers. ``ClassificationError`` and its subclasses
describe a single input file that does not follow the naming convention;
the driver collects them into the report files and keeps going. Every
other ``HeroRefactorError`` is fatal and ends the run with a non-zero
exit status.
"""


class HeroRefactorError(Exception):
    """Base class for every error raised by hero-refactor."""


class ClassificationError(HeroRefactorError):
    """A path could not be mapped to a hero skill or skin."""


class UndefinedPathError(ClassificationError):
    """The path is too short, has an unknown extension or lacks a hero folder."""

    def __init__(self, message: str = "undefined path"):
        super().__init__(message)


class WrongFormatError(ClassificationError):
    """A path component does not follow the expected naming pattern."""

    def __init__(self, message: str = "wrong format"):
        super().__init__(message)


class NumberFormatError(WrongFormatError, ValueError):
    """A skill or skin number is not a base-10 integer."""


class WalkError(HeroRefactorError):
    """A source directory could not be listed."""


class SkillNameTableError(HeroRefactorError):
    """The skill name CSV could not be read."""


class InconsistentIndexError(HeroRefactorError):
    """An index holds an entry that the classifier never produces."""


class OutputError(HeroRefactorError):
    """An output file could not be serialized or written."""


class ConfigError(HeroRefactorError):
    """The configuration file is malformed."""

# file_analyzer/core/errors.py


class AnalysisError(Exception):
    """Base class for failures surfaced by the analysis engine."""


class EmptyInputError(AnalysisError):
    pass


class MalformedNumericError(AnalysisError):
    """A column classified as numeric could not be summarized.

    Inference and summarization share one parser, so this indicates an
    internal inconsistency rather than bad user data. It is never retried.
    """


class UnsupportedFileError(AnalysisError):
    pass

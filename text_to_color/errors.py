class TextToColorError(Exception):
    """Base class for failures surfaced to API callers."""

    status_code = 500


class InputValidationError(TextToColorError):
    """Rejected before any store or network access."""

    status_code = 400


class CompletionError(TextToColorError):
    """The completion service gave no usable answer."""

    status_code = 502


class EmptyCompletionError(CompletionError):
    pass


class MissingColorError(CompletionError):
    pass

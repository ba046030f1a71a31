"""Errors surfaced to the operator."""


class PrintEngineError(Exception):
    """Base class of print engine errors."""


class PrintSurfaceUnavailableError(PrintEngineError):
    """The output could not be opened for printing.

    Raised when the output file cannot be written or no browser could be
    launched to show it. No automatic recovery is possible.
    """

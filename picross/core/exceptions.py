"""Custom exception hierarchy for the line engine."""


class PicrossError(Exception):
    """Base exception for line engine failures."""


class CellStateError(PicrossError):
    """Raised when a cell is used against its one-way state machine."""


class CellAlreadySolvedError(CellStateError):
    """Raised when a solved cell is marked a second time."""


class CellUnsolvedError(CellStateError):
    """Raised when the filled/empty identity of an unknown cell is queried."""


class HintOverflowError(PicrossError):
    """Raised when the hints need more room than the line provides."""


class WindowBoundsError(PicrossError):
    """Raised when a candidate window reaches past the end of the line."""


class LinePatternError(PicrossError):
    """Raised when a textual line contains an unsupported character."""

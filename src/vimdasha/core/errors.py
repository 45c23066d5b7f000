class VimdashaError(Exception):
    """Base error."""

class ConfigurationError(VimdashaError):
    """Raised when the static lord/nakshatra tables disagree (a lord is missing from the sequence)."""

class InvalidArgumentError(VimdashaError, ValueError):
    """Raised for rejected inputs: depth out of range, non-finite time, bad civil date fields."""

class EphemerisUnavailableError(VimdashaError, RuntimeError):
    """Raised when the optional ephemeris extras are not installed."""

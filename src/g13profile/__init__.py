"""g13profile: profile manager for the Logitech G13 and the g13d daemon."""

__version__ = "1.0.0"

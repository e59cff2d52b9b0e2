"""Text messaging between processes over SIGUSR1 and SIGUSR2, with C-style string and ASCII helpers."""

__version__ = "0.1.0"
__all__ = ["charclass", "client", "protocol", "server", "textutils"]
"""lgrep - concurrent, cancellable line search for text files."""

__version__ = "0.1.0"

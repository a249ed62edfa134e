# Where: lgrep.features.search.adapters
# What: Concrete sinks wired into the search use cases.

from .logging_diagnostics import LoggingDiagnosticSink

__all__ = ["LoggingDiagnosticSink"]

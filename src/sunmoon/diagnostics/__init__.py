"""Diagnostics package.

Stand-alone scripts with a main(argv); reachable through `sunmoon diag <tool>`.
"""

__all__ = ["altitude_trace", "phase_calendar"]

"""Diagnostics package.

- diagnostics.phase_table: always available, no extra dependencies
- diagnostics.ephem: optional (requires ephemeris extras)
"""

__all__ = ["phase_table"]

"""Runtime package.

Keep this module dependency-light: importing `src.runtime.*` in unit tests should
not open network connections or require API credentials.
"""

__all__: list[str] = []

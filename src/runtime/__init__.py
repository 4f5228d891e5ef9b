"""Runtime package.

Keep this module dependency-light: importing `src.runtime.*` in unit tests
should not open network clients or touch the filesystem.
"""

__all__: list[str] = []

"""logoutline: outline view over HTML run logs with ``<pre>``-wrapped job records.

The package turns a log document into a forest of job nodes grouped by
realization, with elapsed time summed per subtree. Front ends (CLI, HTTP API,
editor extensions) consume the forest; the parser itself has no UI dependency.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"

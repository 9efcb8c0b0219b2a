"""ason-query — read, combine and reformat ASON documents.

``aq`` loads one or more ASON documents, combines several of them into
a single tuple, and writes the result in canonical form.
"""

from ason_query.version import __version__

__all__: list[str] = ["__version__"]

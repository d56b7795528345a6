"""searchbridge — Vendor-neutral search queries compiled for remote search engines.

Callers describe a request with the neutral ``Search`` model and a tree of
typed filter conditions.  An engine adapter compiles it to the engine's
native query/filter syntax, executes it, and hydrates the raw hits back
into neutral documents.
"""

__version__ = "0.1.0"

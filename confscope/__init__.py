"""Building blocks for declarative configuration: namespaces, visitors, checks, path checks and metadata."""

__version__ = "0.1.0"
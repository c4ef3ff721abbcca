"""Recipe Finder: TheMealDB search merged with a bundled local dataset."""

__version__ = "0.1.0"

"""HTTP API for Recipe Finder."""

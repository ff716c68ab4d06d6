"""fme — edit YAML frontmatter in markdown notes."""

__version__ = "0.1.0"

"""Add Hugo frontmatter to raw markdown blog posts."""

__version__ = "0.1.0"

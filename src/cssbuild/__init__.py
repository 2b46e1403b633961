"""cssbuild - fluent builder for CSS3 selector strings."""

__version__ = "0.1.0"

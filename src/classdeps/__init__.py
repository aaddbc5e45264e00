"""classdeps - class-level dependency extraction for Java source trees."""

__version__ = "0.1.0"

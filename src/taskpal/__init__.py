"""taskpal: a line-oriented personal task tracker."""

__version__ = "0.1.0"

"""IPv6 address calculator and subnet planner."""

__version__ = "1.0.0"

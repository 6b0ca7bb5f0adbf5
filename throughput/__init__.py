"""Building blocks for network throughput measurement: units, timers, settings, error codes and TCP_INFO."""

__version__ = "0.1.0"

__all__ = ["constants", "settings", "units", "timer", "tcpinfo"]
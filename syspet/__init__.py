"""syspet - a system health pet driven by RAM, CPU and temp-file bloat."""

__version__ = "0.1.0"

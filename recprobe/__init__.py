"""recprobe - structural hints for undocumented binary formats."""

__version__ = "0.1.0"

"""catbash - write a command to a file, then pipe the file into bash."""

__version__ = "0.1.0"

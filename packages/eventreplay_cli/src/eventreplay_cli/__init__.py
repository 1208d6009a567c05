"""eventreplay CLI - replay recorded event streams from the command line"""

__version__ = "0.1.0"

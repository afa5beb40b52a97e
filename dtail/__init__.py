"""Log tailing building blocks: colours, logging, client options and filtered file reading."""

__version__ = "0.1.0"
"""Chat message functions: postMessage, getChat and deleteChat."""

__version__ = "0.1.0"

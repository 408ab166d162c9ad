"""A shared 8-bit calculator served over TCP, with a client that sends operations from a file."""

__version__ = "0.1.0"
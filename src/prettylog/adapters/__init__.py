"""Adapters connecting the core to streams and the logging module."""

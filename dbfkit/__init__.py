"""Encoding helpers and header-date handling for dBASE (.dbf) table files."""

__version__ = "0.1.0"
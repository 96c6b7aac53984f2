"""Outer helpers built on the adapter contract (transport command, CLI).

Nothing here performs network I/O: the CLI prints commands and decodes
captured output, it never launches the transport.
"""

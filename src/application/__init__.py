"""Application Layer.

Text reports and the command line entry point. This layer handles console
I/O and coordinates domain operations.
"""

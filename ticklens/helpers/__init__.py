"""
Tick state providers and loaders built on top of the scanner.
"""

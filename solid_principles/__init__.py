"""SOLID Principles by Example - Root Package.

This package holds short paired code snippets ("Bad" vs "Good") for the five
SOLID object-oriented design principles, together with the tooling that keeps
them honest: a catalog of principles and their prose, a validator that checks
each snippet against what the prose claims, and a README renderer/checker that
keeps the embedded examples identical to the snippet files.

Key Components:
    - snippets: the Bad/Good snippet modules, one subpackage per principle
    - domain: principle and snippet models, exceptions and ports
    - catalog: registry of the principles in S-O-L-I-D order
    - application: snippet validation and README services
    - infrastructure: snippet source, README rendering and logging
    - config: configuration schemas and loading
    - cli: command-line entry point
"""

from ._package import PACKAGE_NAME
from ._version import __version__

__package_name__ = PACKAGE_NAME

__all__ = ["__version__", "__package_name__"]

"""Clean Patterns - Root Package.

Readable reference implementations of clean code rules and of five classic
design patterns: Singleton, Factory, Observer, Strategy and Decorator.

Key Components:
    - domain: The examples themselves, with the shared exception hierarchy
    - application: Service that runs examples and collects their output
    - infrastructure: Logging, dependency injection and singleton access
    - config: Pydantic configuration schema and manager
    - cli: Command line interface

Architecture:
    Layers follow Clean Architecture: the domain depends on nothing else,
    infrastructure and the CLI depend inwards.
"""

from ._version import __version__

PACKAGE_NAME = "clean-patterns"

__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> clean-patterns demo all
    >>> clean-patterns factory create suv --format json
"""

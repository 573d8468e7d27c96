"""Testable Patterns Kata - Root Package.

This package backs the patterns article shipped in README.md with working
code. Every snippet the article shows (Humble Object, Factory, Object Parent,
Composite) has a real, tested counterpart here.

Key Components:
    - article: Parsing and structural checks for the article itself
    - application: Account import use case
    - domain: Users, accounts and the ports the patterns are built around
    - infrastructure: Humble objects, import services, factories and parents
    - cli: Command-line entry point

Architecture:
    The code keeps the domain free of infrastructure concerns. Infrastructure
    implements the domain ports and is wired together by object parents.
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "Testable Patterns Kata Contributors"
__package_name__ = PACKAGE_NAME

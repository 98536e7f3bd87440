"""
Run Package

Configuration for populations, read from INI files.

Modules:
    config: Config class
"""

from evopool.run.config import Config

__all__ = ['Config']

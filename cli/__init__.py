"""CLI package for the library catalog"""
from .main import cli

__all__ = ['cli']

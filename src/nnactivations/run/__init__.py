"""
Run Package

This package builds activation functions from INI configuration files.

Modules:
    config: Configuration management for activation parameters

Exported Classes:
    Config: Activation function configuration
"""

from nnactivations.run.config import Config

__all__ = ['Config']

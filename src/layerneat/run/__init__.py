"""
Run Package

This package drives NEAT runs.

Exported Classes:
    Config:        Configuration parameters of a run
    Environment:   Abstract base class for the problems NEAT is applied to
    NeatAlgorithm: The evolution loop
"""

from layerneat.run.config         import Config
from layerneat.run.environment    import Environment
from layerneat.run.neat_algorithm import NeatAlgorithm

__all__ = ['Config', 'Environment', 'NeatAlgorithm']

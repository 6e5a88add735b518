"""
Passforge - password generator with strength analysis.
"""

from .config import GeneratorConfig
from .exceptions import ConfigurationError, ExportError, PassforgeException
from .utils.password_generator import (
    PasswordGenerator,
    build_charset,
    generate,
    generate_multiple,
    generate_password,
)
from .utils.strength import EvaluationResult, StrengthLevel, evaluate_strength

__version__ = "0.1.0"

__all__ = [
    'GeneratorConfig',
    'ConfigurationError',
    'ExportError',
    'PassforgeException',
    'PasswordGenerator',
    'build_charset',
    'generate',
    'generate_multiple',
    'generate_password',
    'EvaluationResult',
    'StrengthLevel',
    'evaluate_strength',
]

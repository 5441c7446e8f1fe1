from .helpers import setup_logging, validate_positive_float

__all__ = [
    'setup_logging',
    'validate_positive_float'
]

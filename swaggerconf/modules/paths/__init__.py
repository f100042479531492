from .selectors import (
    DEFAULT_INCLUDE_PATTERN,
    ERROR_PATH_PATTERN,
    PathSelector,
    documented_paths,
    effective_include_pattern,
    regex,
)

__all__ = [
    'DEFAULT_INCLUDE_PATTERN',
    'ERROR_PATH_PATTERN',
    'PathSelector',
    'documented_paths',
    'effective_include_pattern',
    'regex',
]

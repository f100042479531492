"""Regular-expression path selectors.

A selector includes a path when the include pattern matches the whole path
and, if an exclude pattern is set, the exclude pattern does not.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict

DEFAULT_INCLUDE_PATTERN = "/.*"
ERROR_PATH_PATTERN = "/error.*"


def effective_include_pattern(pattern: Optional[str]) -> str:
    """Return ``pattern`` unless it is missing or blank, else the catch-all."""
    if pattern is None or not pattern.strip():
        return DEFAULT_INCLUDE_PATTERN
    return pattern


class PathSelector(BaseModel):
    model_config = ConfigDict(frozen=True)

    include: re.Pattern
    exclude: Optional[re.Pattern] = None

    def applies(self, path: str) -> bool:
        if self.include.fullmatch(path) is None:
            return False
        if self.exclude is not None and self.exclude.fullmatch(path) is not None:
            return False
        return True


def regex(pattern: Optional[str]) -> PathSelector:
    """Selector for paths matching ``pattern`` (blank selects every path)."""
    return PathSelector(include=re.compile(effective_include_pattern(pattern)))


def documented_paths(pattern: Optional[str]) -> PathSelector:
    """Selector for ``pattern`` that never lets ``/error`` paths through."""
    return PathSelector(
        include=re.compile(effective_include_pattern(pattern)),
        exclude=re.compile(ERROR_PATH_PATTERN),
    )

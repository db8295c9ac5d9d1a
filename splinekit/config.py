"""Process-wide default options for new splines."""

from __future__ import annotations

import copy

from .model import SplineOptions

_DEFAULT_OPTIONS = SplineOptions()


def get_default_options() -> SplineOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: SplineOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)

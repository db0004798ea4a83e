from .chain import FAST_PATH_RULES, resolve_fast_path
from .context import FastPathContext

__all__ = ["FAST_PATH_RULES", "FastPathContext", "resolve_fast_path"]

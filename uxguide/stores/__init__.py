"""On-disk outputs for generated design systems."""

from .persist import PersistResult, persist_design_system, slugify

__all__ = ["PersistResult", "persist_design_system", "slugify"]

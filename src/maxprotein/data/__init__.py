"""Food data loading."""

from maxprotein.data.usda_loader import AbbrevLoader, load_usda_abbrev

__all__ = ["AbbrevLoader", "load_usda_abbrev"]

"""
Lenses.

    from fnbox import lens as L

    active = L.path_lens(["filters", "active"])
    L.view(active, state)
    L.set(active, [], state)
"""

from .optics import Lens, compose_lenses, index_lens, lens, over, path_lens, prop_lens, set, view

__all__ = (
    "Lens",
    "compose_lenses",
    "index_lens",
    "lens",
    "over",
    "path_lens",
    "prop_lens",
    "set",
    "view",
)

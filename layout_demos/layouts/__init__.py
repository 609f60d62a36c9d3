"""Layout algorithms and the Qt container that runs them."""

from .layout_protocol import (Anchor, CustomLayout, LayoutCache, ProposedSize, Subview,
                              ViewSpacing)
from .equal_width_hstack import EqualWidthCache, EqualWidthHStack
from .waterfall_layout import WaterfallGeometry, WaterfallLayout

__all__ = [
    'Anchor',
    'CustomLayout',
    'LayoutCache',
    'ProposedSize',
    'Subview',
    'ViewSpacing',
    'EqualWidthCache',
    'EqualWidthHStack',
    'WaterfallGeometry',
    'WaterfallLayout',
]

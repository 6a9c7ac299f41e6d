"""
Panels for docui.

Quick Start:
    from docui.ui.panels import ImageList, DetailPanel

    images = ImageList(ctx, IMAGE_LIST, position)
    ctx.panels.register(images)
    images.initialize()
"""

# Protocol and base class
from .protocol import SHARED_ACTIONS, Panel, PanelBase, PanelKind, declared_bindings

# Persistent panels
from .list_panel import Column, ListPanel
from .detail_panel import DetailPanel
from .image_list import ImageList
from .container_list import ContainerList
from .volume_list import VolumeList
from .network_list import NetworkList

# Overlays
from .confirm import CONFIRM_PANEL, ConfirmModal, ConfirmPanel
from .input_form import INPUT_PANEL, FormField, InputForm, InputPanel

__all__ = [
    # Protocol and base class
    "Panel",
    "PanelBase",
    "PanelKind",
    "SHARED_ACTIONS",
    "declared_bindings",
    # Persistent panels
    "Column",
    "ListPanel",
    "DetailPanel",
    "ImageList",
    "ContainerList",
    "VolumeList",
    "NetworkList",
    # Overlays
    "CONFIRM_PANEL",
    "ConfirmModal",
    "ConfirmPanel",
    "INPUT_PANEL",
    "FormField",
    "InputForm",
    "InputPanel",
]

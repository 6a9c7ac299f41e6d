"""Centralized panel IDs to ensure consistency across the UI."""

# Persistent panels, in tab order
IMAGE_LIST = "images"
CONTAINER_LIST = "containers"
VOLUME_LIST = "volumes"
NETWORK_LIST = "networks"
DETAIL = "detail"

LIST_PANELS = (IMAGE_LIST, CONTAINER_LIST, VOLUME_LIST, NETWORK_LIST)
PERSISTENT_PANELS = LIST_PANELS + (DETAIL,)

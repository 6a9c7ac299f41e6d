"""Container engine client and domain objects."""

from .client import DockerClient, is_valid_ref, split_csv
from .models import Container, Image, Network, Resource, Volume

__all__ = [
    "Container",
    "DockerClient",
    "Image",
    "Network",
    "Resource",
    "Volume",
    "is_valid_ref",
    "split_csv",
]

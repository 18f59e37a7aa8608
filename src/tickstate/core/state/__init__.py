"""Deep patch engine and state tree helpers."""

from tickstate.core.state.models import NodeKind, PatchError, is_same, node_kind
from tickstate.core.state.operations import patch

__all__ = [
    "patch",
    "PatchError",
    "NodeKind",
    "node_kind",
    "is_same",
]

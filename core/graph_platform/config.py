"""
    Platform configuration - listing order and script runner settings.
"""
from dataclasses import dataclass

from api.api.exceptions import InvalidArgumentsError
from api.api.models.graph import NODE_ORDERS, NODE_ORDER_ALPHABETICAL


@dataclass
class PlatformConfig:
    """
    Top-level configuration for the Graph Platform.

    Attributes:
        node_listing_order: Order of names in ``list_nodes`` output,
                            ``"alphabetical"`` or ``"insertion"``.
        echo_comments:      Whether the script runner copies blank and
                            ``#`` comment lines to its output.
        path_arrow:         Token separating sources from destinations
                            in ``FindPath`` commands.
    """
    node_listing_order: str = NODE_ORDER_ALPHABETICAL
    echo_comments: bool = True
    path_arrow: str = "->"

    def __post_init__(self):
        if self.node_listing_order not in NODE_ORDERS:
            raise InvalidArgumentsError(
                f"node_listing_order must be one of {NODE_ORDERS}, got '{self.node_listing_order}'"
            )
        if not self.path_arrow or any(ch.isspace() for ch in self.path_arrow):
            raise InvalidArgumentsError("path_arrow must be a single non-empty token")

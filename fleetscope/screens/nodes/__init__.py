"""Nodes view."""

from fleetscope.screens.nodes.nodes_screen import NodesScreen
from fleetscope.screens.nodes.presenter import NodesPresenter

__all__ = ["NodesPresenter", "NodesScreen"]

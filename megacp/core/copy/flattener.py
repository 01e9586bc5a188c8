"""Expands folder sources into every node the copy request must carry."""
from typing import List

from .models import CopyItem, CopyPlan
from ..nodes import Filesystem, Node, NodeType


def flatten(filesystem: Filesystem, node: Node, recursive: bool = False) -> List[CopyItem]:
    """
    Lists the items for one top-level source.
    
    The source comes first without a parent link. In recursive mode every
    descendant of a folder follows exactly once, linked to its original
    parent handle.
    """
    items = [CopyItem(node=node)]
    
    if recursive and node.type == NodeType.FOLDER:
        items.extend(
            CopyItem(node=child, parent=child.parent)
            for child in filesystem.get_children_deep(node)
        )
    
    return items


def flatten_plan(filesystem: Filesystem, plan: CopyPlan, recursive: bool = False) -> List[CopyItem]:
    """Lists the items for every source of a plan, in source order."""
    items = []
    for node in plan.sources:
        items.extend(flatten(filesystem, node, recursive))
    return items

"""Domain 实体

导出所有领域实体，方便其他模块导入
"""

from playbook_graph.domain.entities.graph import GraphEdge, GraphNode, PlaybookGraph
from playbook_graph.domain.entities.playbook import PlaybookStep

__all__ = ["GraphEdge", "GraphNode", "PlaybookGraph", "PlaybookStep"]

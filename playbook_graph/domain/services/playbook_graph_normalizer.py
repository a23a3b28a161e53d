"""图规范化

返回一个清理后的新图（输入不被修改）：
- 重复 id 的节点只保留第一次出现
- 丢弃引用不存在节点的边
- 节点数大于 1 时，丢弃没有任何关联边的孤立节点
"""

from __future__ import annotations

import logging

from playbook_graph.domain.entities.graph import GraphEdge, GraphNode, PlaybookGraph

logger = logging.getLogger(__name__)


def normalize_graph(graph: PlaybookGraph) -> PlaybookGraph:
    nodes: list[GraphNode] = []
    node_ids: set[str] = set()
    for node in graph.nodes:
        if node.id in node_ids:
            continue
        node_ids.add(node.id)
        nodes.append(node)

    edges: list[GraphEdge] = [
        edge for edge in graph.edges if edge.source in node_ids and edge.target in node_ids
    ]

    if len(nodes) > 1:
        connected = {edge.source for edge in edges} | {edge.target for edge in edges}
        nodes = [node for node in nodes if node.id in connected]

    dropped_nodes = len(graph.nodes) - len(nodes)
    dropped_edges = len(graph.edges) - len(edges)
    if dropped_nodes or dropped_edges:
        logger.info(
            "playbook_graph_normalized",
            extra={"dropped_nodes": dropped_nodes, "dropped_edges": dropped_edges},
        )

    return PlaybookGraph.create(nodes=nodes, edges=edges)

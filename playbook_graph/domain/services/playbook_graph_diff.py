"""图差异比较

比较已保存版本和编辑器中当前版本的图：
- 节点按 id 对齐，比较 label / type / config（位置属于展示信息，不计入变化）
- 边按 (source, target, label) 三元组对齐，边 id 不参与比较
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from playbook_graph.domain.entities.graph import GraphEdge, GraphNode, PlaybookGraph


@dataclass
class GraphDiff:
    """差异结果"""

    added_nodes: list[dict[str, str]] = field(default_factory=list)
    removed_nodes: list[dict[str, str]] = field(default_factory=list)
    modified_nodes: list[dict[str, Any]] = field(default_factory=list)
    added_edges: list[dict[str, str | None]] = field(default_factory=list)
    removed_edges: list[dict[str, str | None]] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(
            self.added_nodes
            or self.removed_nodes
            or self.modified_nodes
            or self.added_edges
            or self.removed_edges
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "addedNodes": self.added_nodes,
            "removedNodes": self.removed_nodes,
            "modifiedNodes": self.modified_nodes,
            "addedEdges": self.added_edges,
            "removedEdges": self.removed_edges,
            "hasChanges": self.has_changes,
        }


def _node_summary(node: GraphNode) -> dict[str, str]:
    return {"id": node.id, "label": node.label, "type": node.kind.value}


def _edge_key(edge: GraphEdge) -> tuple[str, str, str | None]:
    return (edge.source, edge.target, edge.label)


def _edge_summary(key: tuple[str, str, str | None]) -> dict[str, str | None]:
    source, target, label = key
    return {"source": source, "target": target, "label": label}


def _node_changes(previous: GraphNode, current: GraphNode) -> list[str]:
    changes: list[str] = []
    if previous.label != current.label:
        changes.append("label")
    if previous.kind != current.kind:
        changes.append("type")
    if previous.config != current.config:
        changes.append("config")
    return changes


def diff_graphs(previous: PlaybookGraph | None, current: PlaybookGraph) -> GraphDiff:
    """比较两个图；previous 为 None 时当前图的全部内容都视为新增"""
    previous = previous or PlaybookGraph()
    diff = GraphDiff()

    previous_nodes: dict[str, GraphNode] = {}
    for node in previous.nodes:
        previous_nodes.setdefault(node.id, node)
    current_nodes: dict[str, GraphNode] = {}
    for node in current.nodes:
        current_nodes.setdefault(node.id, node)

    for node_id, node in current_nodes.items():
        old = previous_nodes.get(node_id)
        if old is None:
            diff.added_nodes.append(_node_summary(node))
            continue
        changes = _node_changes(old, node)
        if changes:
            diff.modified_nodes.append({"id": node.id, "label": node.label, "changes": changes})

    for node_id, node in previous_nodes.items():
        if node_id not in current_nodes:
            diff.removed_nodes.append(_node_summary(node))

    # dict 用作有序集合，保证输出顺序稳定
    previous_edges = dict.fromkeys(_edge_key(edge) for edge in previous.edges)
    current_edges = dict.fromkeys(_edge_key(edge) for edge in current.edges)
    diff.added_edges = [_edge_summary(key) for key in current_edges if key not in previous_edges]
    diff.removed_edges = [_edge_summary(key) for key in previous_edges if key not in current_edges]

    return diff

"""Domain Services 模块

领域服务：
- PlaybookGraphValidator: playbook 图结构校验
- playbook_to_graph / graph_to_playbook: playbook ⇄ 图 转换
- normalize_graph: 图规范化
- diff_graphs: 图差异比较
"""

from playbook_graph.domain.services.playbook_graph_converter import (
    graph_to_playbook,
    playbook_to_graph,
)
from playbook_graph.domain.services.playbook_graph_diff import GraphDiff, diff_graphs
from playbook_graph.domain.services.playbook_graph_normalizer import normalize_graph
from playbook_graph.domain.services.playbook_graph_validator import (
    PlaybookGraphValidator,
    ValidationIssue,
    ValidationResult,
    validate,
)

__all__ = [
    "GraphDiff",
    "PlaybookGraphValidator",
    "ValidationIssue",
    "ValidationResult",
    "diff_graphs",
    "graph_to_playbook",
    "normalize_graph",
    "playbook_to_graph",
    "validate",
]

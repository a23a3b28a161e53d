"""Domain 值对象

导出所有领域值对象，方便其他模块导入
"""

from playbook_graph.domain.value_objects.issue_code import IssueCode, IssueSeverity
from playbook_graph.domain.value_objects.node_kind import NodeKind
from playbook_graph.domain.value_objects.position import Position

__all__ = ["IssueCode", "IssueSeverity", "NodeKind", "Position"]

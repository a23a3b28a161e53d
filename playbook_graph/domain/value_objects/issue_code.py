"""校验问题的错误码与严重级别

错误码是一个封闭词表，前端据此做内联标注；
每个错误码的严重级别是固定的（见 ISSUE_SEVERITIES）。
"""

from enum import Enum


class IssueSeverity(str, Enum):
    """严重级别

    - ERROR: 图不可执行，保存/执行应被拒绝
    - WARNING: 图可执行，但需要人工确认
    """

    ERROR = "error"
    WARNING = "warning"


class IssueCode(str, Enum):
    """校验问题错误码"""

    EMPTY_GRAPH = "EMPTY_GRAPH"
    DUPLICATE_KEYS = "DUPLICATE_KEYS"
    INVALID_EDGES = "INVALID_EDGES"
    NO_ENTRY_POINT = "NO_ENTRY_POINT"
    MULTIPLE_ENTRY_POINTS = "MULTIPLE_ENTRY_POINTS"
    ORPHANED_NODES = "ORPHANED_NODES"
    CYCLIC_GRAPH = "CYCLIC_GRAPH"
    INCOMPLETE_BRANCH = "INCOMPLETE_BRANCH"

    @property
    def severity(self) -> IssueSeverity:
        return ISSUE_SEVERITIES[self]


ISSUE_SEVERITIES: dict[IssueCode, IssueSeverity] = {
    IssueCode.EMPTY_GRAPH: IssueSeverity.ERROR,
    IssueCode.DUPLICATE_KEYS: IssueSeverity.ERROR,
    IssueCode.INVALID_EDGES: IssueSeverity.ERROR,
    IssueCode.NO_ENTRY_POINT: IssueSeverity.ERROR,
    IssueCode.MULTIPLE_ENTRY_POINTS: IssueSeverity.ERROR,
    IssueCode.ORPHANED_NODES: IssueSeverity.ERROR,
    IssueCode.CYCLIC_GRAPH: IssueSeverity.ERROR,
    IssueCode.INCOMPLETE_BRANCH: IssueSeverity.WARNING,
}

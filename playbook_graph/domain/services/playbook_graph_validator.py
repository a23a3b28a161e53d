"""PlaybookGraphValidator - playbook 图结构校验（Domain Service）

目标：
- 在图交给执行引擎之前，判断它是否是结构上可执行的工作流
- 所有问题都以 issue 返回（错误码 + 严重级别 + 消息），从不抛异常
- 纯计算：不修改输入，不持有跨调用状态，可被多个调用方并发使用

检查顺序（结果按此顺序拼接）：
1. 形状检查：空图 / 重复 id / 悬空边
2. 入口分析：入度为 0 的节点必须恰好一个
3. 可达性分析：从唯一入口出发不可达的节点为孤儿节点
4. 环检测：三色 DFS（显式栈）
5. 分支完整性：BRANCH 节点的出边标签应覆盖 {"true", "false"}
"""

from __future__ import annotations

import logging
import time
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any

from playbook_graph.domain.entities.graph import GraphEdge, GraphNode, PlaybookGraph
from playbook_graph.domain.exceptions import DomainValidationError
from playbook_graph.domain.value_objects.issue_code import IssueCode, IssueSeverity
from playbook_graph.domain.value_objects.node_kind import NodeKind

logger = logging.getLogger(__name__)

BRANCH_OUTCOMES: tuple[str, ...] = ("true", "false")

_UNVISITED = 0
_IN_PROGRESS = 1
_DONE = 2


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """单条结构化校验结果

    - node_id / edge_id: 问题只涉及单个节点/边时填写，供编辑器内联标注
    - meta: 聚合类问题的完整 id 列表（node_ids / edge_ids）等附加信息
    """

    code: IssueCode
    severity: IssueSeverity
    message: str
    node_id: str | None = None
    edge_id: str | None = None
    meta: dict[str, Any] = field(default_factory=dict, hash=False)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code.value,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.node_id is not None:
            payload["nodeId"] = self.node_id
        if self.edge_id is not None:
            payload["edgeId"] = self.edge_id
        if self.meta:
            payload["meta"] = {key: list(value) for key, value in self.meta.items()}
        return payload


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """校验结果

    - valid: 当且仅当没有 error 级别的 issue
    - errors: error 级别 issue 的消息（保持顺序，兼容只读字符串列表的调用方）
    - issues: 权威的结构化结果
    """

    valid: bool
    errors: tuple[str, ...]
    issues: tuple[ValidationIssue, ...]

    @classmethod
    def from_issues(cls, issues: list[ValidationIssue]) -> ValidationResult:
        errors = tuple(issue.message for issue in issues if issue.severity == IssueSeverity.ERROR)
        return cls(valid=not errors, errors=errors, issues=tuple(issues))

    @property
    def warnings(self) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.severity == IssueSeverity.WARNING)

    def codes(self) -> list[IssueCode]:
        return [issue.code for issue in self.issues]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(slots=True)
class _GraphView:
    """单次调用内的索引视图

    - nodes: 每个 id 首次出现的节点（保持输入顺序）
    - index: 节点 id → nodes 下标
    - adjacency: 每个源节点下标的出边 (目标下标, 边)，只包含有效边，保持边的输入顺序
    """

    nodes: list[GraphNode]
    index: dict[str, int]
    adjacency: list[list[tuple[int, GraphEdge]]]


def _append_issue(
    issues: list[ValidationIssue],
    code: IssueCode,
    message: str,
    *,
    node_id: str | None = None,
    edge_id: str | None = None,
    meta: dict[str, Any] | None = None,
) -> None:
    issues.append(
        ValidationIssue(
            code=code,
            severity=code.severity,
            message=message,
            node_id=node_id,
            edge_id=edge_id,
            meta=meta or {},
        )
    )


def _single(ids: list[str]) -> str | None:
    return ids[0] if len(ids) == 1 else None


def _normalize_label(label: str | None) -> str | None:
    if not isinstance(label, str):
        return None
    return label.strip().lower()


@dataclass(frozen=True, slots=True)
class PlaybookGraphValidator:
    """校验 playbook 图是否可以交给执行引擎

    说明：
    - validate() 永不抛异常，任何异常输入都体现为 issue
    - validate_or_raise() 供必须拒绝非法图的调用方使用
    """

    def validate(self, graph: PlaybookGraph) -> ValidationResult:
        started = time.perf_counter()
        issues: list[ValidationIssue] = []

        if not graph.nodes:
            # 空图上的其余检查没有意义
            _append_issue(issues, IssueCode.EMPTY_GRAPH, "Graph must have at least one node")
        else:
            view = self._validate_shape(graph, issues=issues)
            entry_index = self._validate_entry_point(view, issues=issues)
            if entry_index is not None:
                self._validate_reachability(view, entry_index, issues=issues)
            self._validate_acyclic(view, issues=issues)
            self._validate_branches(view, issues=issues)

        result = ValidationResult.from_issues(issues)

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "playbook_graph_validation",
            extra={
                "node_count": len(graph.nodes),
                "edge_count": len(graph.edges),
                "issue_count": len(result.issues),
                "valid": result.valid,
                "validation_ms": elapsed_ms,
            },
        )
        return result

    def validate_or_raise(self, graph: PlaybookGraph) -> ValidationResult:
        result = self.validate(graph)
        if not result.valid:
            raise DomainValidationError(
                "Playbook graph validation failed",
                code="graph_invalid",
                errors=[issue.to_dict() for issue in result.issues],
            )
        return result

    def _validate_shape(
        self, graph: PlaybookGraph, *, issues: list[ValidationIssue]
    ) -> _GraphView:
        duplicates = [
            node_id for node_id, count in Counter(graph.node_ids()).items() if count > 1
        ]
        if duplicates:
            _append_issue(
                issues,
                IssueCode.DUPLICATE_KEYS,
                f"Duplicate node ids: {', '.join(duplicates)}",
                node_id=_single(duplicates),
                meta={"node_ids": duplicates},
            )

        nodes: list[GraphNode] = []
        index: dict[str, int] = {}
        for node in graph.nodes:
            if node.id in index:
                continue
            index[node.id] = len(nodes)
            nodes.append(node)

        adjacency: list[list[tuple[int, GraphEdge]]] = [[] for _ in nodes]
        invalid_edge_ids: list[str] = []
        for edge in graph.edges:
            source_index = index.get(edge.source)
            target_index = index.get(edge.target)
            if source_index is None or target_index is None:
                invalid_edge_ids.append(edge.id)
                continue
            adjacency[source_index].append((target_index, edge))

        if invalid_edge_ids:
            _append_issue(
                issues,
                IssueCode.INVALID_EDGES,
                f"Found {len(invalid_edge_ids)} edges referencing non-existent nodes: "
                f"{', '.join(invalid_edge_ids)}",
                edge_id=_single(invalid_edge_ids),
                meta={"edge_ids": invalid_edge_ids},
            )

        return _GraphView(nodes=nodes, index=index, adjacency=adjacency)

    def _validate_entry_point(
        self, view: _GraphView, *, issues: list[ValidationIssue]
    ) -> int | None:
        in_degree = [0] * len(view.nodes)
        for outgoing in view.adjacency:
            for target_index, _edge in outgoing:
                in_degree[target_index] += 1

        roots = [idx for idx, degree in enumerate(in_degree) if degree == 0]
        # 没有任何关联边的孤立节点不作为入口，由可达性分析报告为孤儿节点；
        # 只有不存在带出边的根节点时（如全部节点都孤立）才退回到全部入度为 0 的节点
        candidates = [idx for idx in roots if view.adjacency[idx]] or roots
        if not candidates:
            _append_issue(
                issues,
                IssueCode.NO_ENTRY_POINT,
                "Graph must have exactly one entry point (node with no incoming edges)",
            )
            return None

        if len(candidates) > 1:
            entry_ids = [view.nodes[idx].id for idx in candidates]
            _append_issue(
                issues,
                IssueCode.MULTIPLE_ENTRY_POINTS,
                f"Graph has {len(candidates)} entry points, but should have exactly one",
                meta={"node_ids": entry_ids},
            )
            return None

        return candidates[0]

    def _validate_reachability(
        self, view: _GraphView, entry_index: int, *, issues: list[ValidationIssue]
    ) -> None:
        visited = [False] * len(view.nodes)
        visited[entry_index] = True
        queue: deque[int] = deque([entry_index])
        while queue:
            current = queue.popleft()
            for target_index, _edge in view.adjacency[current]:
                if not visited[target_index]:
                    visited[target_index] = True
                    queue.append(target_index)

        orphaned = [view.nodes[idx].id for idx, seen in enumerate(visited) if not seen]
        if orphaned:
            entry_id = view.nodes[entry_index].id
            _append_issue(
                issues,
                IssueCode.ORPHANED_NODES,
                f"Found {len(orphaned)} orphaned nodes (not reachable from entry point "
                f"'{entry_id}'): {', '.join(orphaned)}",
                node_id=_single(orphaned),
                meta={"node_ids": orphaned},
            )

    def _validate_acyclic(self, view: _GraphView, *, issues: list[ValidationIssue]) -> None:
        state = [_UNVISITED] * len(view.nodes)

        for root in range(len(view.nodes)):
            if state[root] != _UNVISITED:
                continue

            state[root] = _IN_PROGRESS
            stack = [(root, iter(view.adjacency[root]))]
            while stack:
                current, successors = stack[-1]
                for target_index, edge in successors:
                    if state[target_index] == _IN_PROGRESS:
                        node_id = view.nodes[target_index].id
                        _append_issue(
                            issues,
                            IssueCode.CYCLIC_GRAPH,
                            f"Graph contains a cycle (edge '{edge.id}' leads back to "
                            f"node '{node_id}')",
                            node_id=node_id,
                            edge_id=edge.id,
                        )
                        return
                    if state[target_index] == _UNVISITED:
                        state[target_index] = _IN_PROGRESS
                        stack.append((target_index, iter(view.adjacency[target_index])))
                        break
                else:
                    state[current] = _DONE
                    stack.pop()

    def _validate_branches(self, view: _GraphView, *, issues: list[ValidationIssue]) -> None:
        for node_index, node in enumerate(view.nodes):
            if node.kind != NodeKind.BRANCH:
                continue

            observed = {_normalize_label(edge.label) for _target, edge in view.adjacency[node_index]}
            missing = [outcome for outcome in BRANCH_OUTCOMES if outcome not in observed]
            if missing:
                _append_issue(
                    issues,
                    IssueCode.INCOMPLETE_BRANCH,
                    f"Branch node '{node.id}' has no outgoing edge for: {', '.join(missing)}",
                    node_id=node.id,
                    meta={"missing_outcomes": missing},
                )


_default_validator = PlaybookGraphValidator()


def validate(graph: PlaybookGraph) -> ValidationResult:
    """校验 playbook 图（无状态，线程安全）"""
    return _default_validator.validate(graph)

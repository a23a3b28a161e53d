"""playbook ⇄ 图 转换

- playbook_to_graph: 把按 position 排序的步骤列表转换成编辑器使用的图
- graph_to_playbook: 把编辑器里的图还原为步骤列表

两个函数都不修改输入（config 会被复制）。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from playbook_graph.domain.entities.graph import GraphEdge, GraphNode, PlaybookGraph
from playbook_graph.domain.entities.playbook import (
    FALSE_STEP_KEY,
    TRUE_STEP_KEY,
    PlaybookStep,
)
from playbook_graph.domain.value_objects.node_kind import NodeKind
from playbook_graph.domain.value_objects.position import Position

logger = logging.getLogger(__name__)

# 网格布局：每行 3 个节点
GRID_COLUMNS = 3
GRID_ORIGIN = (100, 100)
GRID_SPACING = (300, 200)

_BRANCH_CONFIG_KEYS = {"true": TRUE_STEP_KEY, "false": FALSE_STEP_KEY}


def grid_position(index: int) -> Position:
    column, row = index % GRID_COLUMNS, index // GRID_COLUMNS
    return Position(
        x=GRID_ORIGIN[0] + column * GRID_SPACING[0],
        y=GRID_ORIGIN[1] + row * GRID_SPACING[1],
    )


def playbook_to_graph(steps: Iterable[PlaybookStep]) -> PlaybookGraph:
    """步骤列表 → 图

    规则：
    - 每个步骤一个节点：id=key，label=name
    - next_step_key → 边 "{key}-{next}"
    - BRANCH 步骤的 trueStep / falseStep → 带 "true" / "false" 标签的边
    """
    ordered = sorted(steps, key=lambda step: step.position)

    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
    for index, step in enumerate(ordered):
        nodes.append(
            GraphNode(
                id=step.key,
                kind=step.type,
                position=grid_position(index),
                label=step.name,
                config=dict(step.config),
            )
        )

        if step.type == NodeKind.BRANCH:
            for label, target in step.branch_targets().items():
                edges.append(
                    GraphEdge(
                        id=f"{step.key}-{label}",
                        source=step.key,
                        target=target,
                        label=label,
                    )
                )
        elif step.next_step_key:
            edges.append(
                GraphEdge(
                    id=f"{step.key}-{step.next_step_key}",
                    source=step.key,
                    target=step.next_step_key,
                )
            )

    logger.debug(
        "playbook_to_graph",
        extra={"node_count": len(nodes), "edge_count": len(edges)},
    )
    return PlaybookGraph.create(nodes=nodes, edges=edges)


def graph_to_playbook(graph: PlaybookGraph) -> list[PlaybookStep]:
    """图 → 步骤列表

    规则：
    - 节点顺序即 position，label 为空时用节点 id 作为步骤名称
    - BRANCH 节点：next_step_key 为 None，"true"/"false" 出边写回 config.trueStep / falseStep
    - 其他节点：next_step_key 为第一条出边的 target
    """
    outgoing: dict[str, list[GraphEdge]] = {}
    for edge in graph.edges:
        outgoing.setdefault(edge.source, []).append(edge)

    steps: list[PlaybookStep] = []
    for position, node in enumerate(graph.nodes):
        node_edges = outgoing.get(node.id, [])
        config = dict(node.config)

        if node.kind == NodeKind.BRANCH:
            seen: set[str] = set()
            for edge in node_edges:
                label = edge.label.strip().lower() if edge.label else ""
                config_key = _BRANCH_CONFIG_KEYS.get(label)
                # 同一分支结果有多条边时以第一条为准
                if config_key is None or config_key in seen:
                    continue
                seen.add(config_key)
                config[config_key] = edge.target
            next_step_key = None
        else:
            next_step_key = node_edges[0].target if node_edges else None

        steps.append(
            PlaybookStep(
                key=node.id,
                name=node.label or node.id,
                type=node.kind,
                config=config,
                position=position,
                next_step_key=next_step_key,
            )
        )

    return steps

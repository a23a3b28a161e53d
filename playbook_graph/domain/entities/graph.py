"""PlaybookGraph 实体 - 可视化编辑器产出的工作流图

业务定义：
- 节点（GraphNode）是 playbook 的一个步骤
- 边（GraphEdge）表示执行顺序依赖，方向为 source → target
- 节点和边只通过字符串 id 相互引用，不持有彼此的对象引用

设计原则：
- 纯 Python 实现，不依赖任何框架
- 全部为 frozen dataclass，校验器和转换器都不会修改输入
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from playbook_graph.domain.value_objects.node_kind import NodeKind
from playbook_graph.domain.value_objects.position import Position


@dataclass(frozen=True)
class GraphNode:
    """图节点

    属性说明：
    - id: 节点标识（图内应唯一，唯一性由校验器检查而不是假设）
    - kind: 节点类型
    - position: 画布位置（展示用）
    - label: 显示名称（展示用）
    - config: 节点配置（对校验器不透明）
    """

    id: str
    kind: NodeKind
    position: Position = field(default_factory=lambda: Position(x=0, y=0))
    label: str = ""
    config: dict[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class GraphEdge:
    """图的有向边

    source / target 可以引用不存在的节点 id，这本身就是一个校验问题，
    而不是前置条件。
    """

    id: str
    source: str
    target: str
    label: str | None = None


@dataclass(frozen=True)
class PlaybookGraph:
    """完整的图：扁平的节点集合 + 扁平的边集合"""

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()

    @classmethod
    def create(
        cls,
        nodes: Iterable[GraphNode] = (),
        edges: Iterable[GraphEdge] = (),
    ) -> PlaybookGraph:
        """从任意可迭代对象创建图（内部统一存为 tuple）"""
        return cls(nodes=tuple(nodes), edges=tuple(edges))

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

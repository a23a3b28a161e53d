"""Playbook 图 DTO（Data Transfer Objects）

定义编辑器 JSON 与 Domain 实体之间的转换：

- 节点：{id, type, position: {x, y}, data: {label, config}}
- 边：{id, source, target, label?}

注意：
- 字段名与前端（React Flow）保持一致，Domain 层使用 kind / label / config
- 节点类型不在 AGENT / DATA / BRANCH / API 中时由 Pydantic 拒绝（422）
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from playbook_graph.domain.entities.graph import GraphEdge, GraphNode, PlaybookGraph
from playbook_graph.domain.entities.playbook import PlaybookStep
from playbook_graph.domain.value_objects.node_kind import NodeKind
from playbook_graph.domain.value_objects.position import Position


class PositionDTO(BaseModel):
    """Position DTO（允许负坐标）"""

    x: float = Field(..., description="横坐标")
    y: float = Field(..., description="纵坐标")

    model_config = ConfigDict(from_attributes=True)


class GraphNodeDataDTO(BaseModel):
    """节点 data 字段"""

    label: str = Field(default="", description="节点显示名称")
    config: dict[str, Any] = Field(default_factory=dict, description="节点配置")


class GraphNodeDTO(BaseModel):
    """Graph Node DTO"""

    id: str
    type: NodeKind = Field(..., description="节点类型")
    position: PositionDTO
    data: GraphNodeDataDTO = Field(default_factory=GraphNodeDataDTO)

    @classmethod
    def from_entity(cls, node: GraphNode) -> "GraphNodeDTO":
        return cls(
            id=node.id,
            type=node.kind,
            position=PositionDTO(x=node.position.x, y=node.position.y),
            data=GraphNodeDataDTO(label=node.label, config=dict(node.config)),
        )

    def to_entity(self) -> GraphNode:
        return GraphNode(
            id=self.id,
            kind=self.type,
            position=Position(x=self.position.x, y=self.position.y),
            label=self.data.label,
            config=dict(self.data.config),
        )


class GraphEdgeDTO(BaseModel):
    """Graph Edge DTO（source / target 可以引用不存在的节点，交给校验器报告）"""

    id: str
    source: str = Field(..., description="源节点 ID")
    target: str = Field(..., description="目标节点 ID")
    label: str | None = Field(default=None, description="边标签（BRANCH 出边使用 true/false）")

    @classmethod
    def from_entity(cls, edge: GraphEdge) -> "GraphEdgeDTO":
        return cls(id=edge.id, source=edge.source, target=edge.target, label=edge.label)

    def to_entity(self) -> GraphEdge:
        return GraphEdge(id=self.id, source=self.source, target=self.target, label=self.label)


class PlaybookGraphDTO(BaseModel):
    """完整的图"""

    nodes: list[GraphNodeDTO] = Field(default_factory=list)
    edges: list[GraphEdgeDTO] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, graph: PlaybookGraph) -> "PlaybookGraphDTO":
        return cls(
            nodes=[GraphNodeDTO.from_entity(node) for node in graph.nodes],
            edges=[GraphEdgeDTO.from_entity(edge) for edge in graph.edges],
        )

    def to_entity(self) -> PlaybookGraph:
        return PlaybookGraph.create(
            nodes=(node.to_entity() for node in self.nodes),
            edges=(edge.to_entity() for edge in self.edges),
        )


class PlaybookStepDTO(BaseModel):
    """Playbook Step DTO（持久化形态的步骤）"""

    key: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: NodeKind
    config: dict[str, Any] = Field(default_factory=dict)
    position: int = Field(default=0, description="在 playbook 中的顺序")
    nextStepKey: str | None = Field(default=None, description="下一步的 key")

    @classmethod
    def from_entity(cls, step: PlaybookStep) -> "PlaybookStepDTO":
        return cls(
            key=step.key,
            name=step.name,
            type=step.type,
            config=dict(step.config),
            position=step.position,
            nextStepKey=step.next_step_key,
        )

    def to_entity(self) -> PlaybookStep:
        return PlaybookStep.create(
            key=self.key,
            name=self.name,
            type=self.type,
            config=self.config,
            position=self.position,
            next_step_key=self.nextStepKey,
        )


class GraphRequest(BaseModel):
    """请求体：{graph}"""

    graph: PlaybookGraphDTO


class StepsRequest(BaseModel):
    """请求体：{steps}"""

    steps: list[PlaybookStepDTO]


class GraphDiffRequest(BaseModel):
    """请求体：{previousGraph?, currentGraph}

    previousGraph 缺省表示还没有已保存的版本，当前图全部视为新增。
    """

    previousGraph: PlaybookGraphDTO | None = None
    currentGraph: PlaybookGraphDTO

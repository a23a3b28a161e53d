"""API DTO（Data Transfer Objects）

DTO 职责：
1. 数据验证：使用 Pydantic 验证请求数据
2. 数据转换：DTO ⇄ Domain Entity
"""

from playbook_graph.interfaces.api.dto.graph_dto import (
    GraphDiffRequest,
    GraphEdgeDTO,
    GraphNodeDataDTO,
    GraphNodeDTO,
    GraphRequest,
    PlaybookGraphDTO,
    PlaybookStepDTO,
    PositionDTO,
    StepsRequest,
)

__all__ = [
    "GraphDiffRequest",
    "GraphEdgeDTO",
    "GraphNodeDTO",
    "GraphNodeDataDTO",
    "GraphRequest",
    "PlaybookGraphDTO",
    "PlaybookStepDTO",
    "PositionDTO",
    "StepsRequest",
]

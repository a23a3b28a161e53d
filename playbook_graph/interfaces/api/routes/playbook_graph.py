"""Playbook graph API routes.

所有端点都是无状态的：请求体里带上图或步骤，服务只做校验/转换/比较，不落库。
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from playbook_graph.domain.services.playbook_graph_converter import (
    graph_to_playbook,
    playbook_to_graph,
)
from playbook_graph.domain.services.playbook_graph_diff import diff_graphs
from playbook_graph.domain.services.playbook_graph_normalizer import normalize_graph
from playbook_graph.domain.services.playbook_graph_validator import PlaybookGraphValidator
from playbook_graph.interfaces.api.dto.graph_dto import (
    GraphDiffRequest,
    GraphRequest,
    PlaybookGraphDTO,
    PlaybookStepDTO,
    StepsRequest,
)

router = APIRouter(prefix="/playbooks", tags=["Playbook Graph"])

_validator = PlaybookGraphValidator()


def _graph_payload(dto: PlaybookGraphDTO) -> dict[str, Any]:
    return dto.model_dump(mode="json")


@router.post("/validate-graph")
async def validate_graph(request: GraphRequest) -> dict[str, Any]:
    """校验图结构（执行前 / 保存前）"""
    result = _validator.validate(request.graph.to_entity())
    return {"success": True, "data": result.to_dict()}


@router.post("/normalize-graph")
async def normalize_graph_endpoint(request: GraphRequest) -> dict[str, Any]:
    """清理悬空边和孤立节点，返回新图及其校验结果"""
    normalized = normalize_graph(request.graph.to_entity())
    return {
        "success": True,
        "data": {
            "graph": _graph_payload(PlaybookGraphDTO.from_entity(normalized)),
            "validation": _validator.validate(normalized).to_dict(),
        },
    }


@router.post("/graph-from-steps")
async def graph_from_steps(request: StepsRequest) -> dict[str, Any]:
    """playbook 步骤列表 → 编辑器图"""
    graph = playbook_to_graph(step.to_entity() for step in request.steps)
    return {
        "success": True,
        "data": {
            "graph": _graph_payload(PlaybookGraphDTO.from_entity(graph)),
            "validation": _validator.validate(graph).to_dict(),
        },
    }


@router.post("/steps-from-graph")
async def steps_from_graph(request: GraphRequest) -> dict[str, Any]:
    """编辑器图 → playbook 步骤列表

    图不合法时抛出 DomainValidationError，由应用级异常处理器转换为 422。
    """
    graph = request.graph.to_entity()
    _validator.validate_or_raise(graph)
    steps = graph_to_playbook(graph)
    return {
        "success": True,
        "data": {
            "steps": [PlaybookStepDTO.from_entity(step).model_dump(mode="json") for step in steps],
        },
    }


@router.post("/diff")
async def diff_graph(request: GraphDiffRequest) -> dict[str, Any]:
    """比较已保存版本与当前图，并校验当前图"""
    previous = request.previousGraph.to_entity() if request.previousGraph else None
    current = request.currentGraph.to_entity()
    return {
        "success": True,
        "data": {
            "diff": diff_graphs(previous, current).to_dict(),
            "validation": _validator.validate(current).to_dict(),
        },
    }

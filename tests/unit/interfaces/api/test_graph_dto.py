"""测试：Playbook 图 DTO 与 Domain 实体之间的转换"""

import pytest
from pydantic import ValidationError

from playbook_graph.domain.entities.graph import GraphEdge, GraphNode, PlaybookGraph
from playbook_graph.domain.entities.playbook import PlaybookStep
from playbook_graph.domain.value_objects.node_kind import NodeKind
from playbook_graph.domain.value_objects.position import Position
from playbook_graph.interfaces.api.dto.graph_dto import (
    GraphDiffRequest,
    GraphNodeDTO,
    PlaybookGraphDTO,
    PlaybookStepDTO,
)


class TestGraphDTO:
    """测试图 DTO"""

    def test_to_entity_maps_editor_fields(self, branch_graph_payload):
        graph = PlaybookGraphDTO.model_validate(branch_graph_payload).to_entity()

        assert isinstance(graph, PlaybookGraph)
        branch = graph.nodes[0]
        assert branch.kind == NodeKind.BRANCH
        assert branch.label == "Quality Check"
        assert branch.config == {"condition": "input.score > 75"}
        assert branch.position == Position(x=100, y=100)
        assert graph.edges[0] == GraphEdge(id="e1", source="branch1", target="high", label="true")

    def test_negative_coordinates_are_allowed(self):
        dto = GraphNodeDTO.model_validate(
            {"id": "a", "type": "DATA", "position": {"x": -50.5, "y": -10}}
        )

        node = dto.to_entity()

        assert node.position == Position(x=-50.5, y=-10)
        assert node.label == ""
        assert node.config == {}

    def test_unknown_node_type_is_rejected(self):
        with pytest.raises(ValidationError):
            GraphNodeDTO.model_validate({"id": "a", "type": "LOOP", "position": {"x": 0, "y": 0}})

    def test_from_entity_round_trip(self):
        graph = PlaybookGraph.create(
            nodes=[GraphNode(id="a", kind=NodeKind.API, label="Call", config={"url": "x"})],
        )

        dumped = PlaybookGraphDTO.from_entity(graph).model_dump(mode="json")

        assert dumped == {
            "nodes": [
                {
                    "id": "a",
                    "type": "API",
                    "position": {"x": 0.0, "y": 0.0},
                    "data": {"label": "Call", "config": {"url": "x"}},
                }
            ],
            "edges": [],
        }

    def test_diff_request_previous_graph_is_optional(self, branch_graph_payload):
        request = GraphDiffRequest.model_validate({"currentGraph": branch_graph_payload})

        assert request.previousGraph is None
        assert len(request.currentGraph.nodes) == 3


class TestPlaybookStepDTO:
    """测试步骤 DTO"""

    def test_to_entity(self):
        dto = PlaybookStepDTO.model_validate(
            {"key": "s1", "name": "Step", "type": "AGENT", "nextStepKey": "s2"}
        )

        step = dto.to_entity()

        assert step == PlaybookStep(
            key="s1", name="Step", type=NodeKind.AGENT, config={}, position=0, next_step_key="s2"
        )

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValidationError):
            PlaybookStepDTO.model_validate({"key": "s1", "name": "", "type": "AGENT"})

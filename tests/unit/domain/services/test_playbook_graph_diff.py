"""diff_graphs 单元测试"""

from playbook_graph.domain.entities.graph import GraphEdge, GraphNode, PlaybookGraph
from playbook_graph.domain.services.playbook_graph_diff import diff_graphs
from playbook_graph.domain.value_objects.node_kind import NodeKind
from playbook_graph.domain.value_objects.position import Position


def _base_graph() -> PlaybookGraph:
    return PlaybookGraph.create(
        nodes=[
            GraphNode(id="step1", kind=NodeKind.AGENT, label="Step 1", config={"agentId": "a"}),
            GraphNode(id="step2", kind=NodeKind.DATA, label="Step 2"),
        ],
        edges=[GraphEdge(id="e1", source="step1", target="step2")],
    )


class TestDiffGraphs:
    """测试图差异比较"""

    def test_identical_graphs_have_no_changes(self):
        diff = diff_graphs(_base_graph(), _base_graph())

        assert diff.has_changes is False
        assert diff.to_dict()["hasChanges"] is False

    def test_without_previous_everything_is_added(self):
        diff = diff_graphs(None, _base_graph())

        assert diff.added_nodes == [
            {"id": "step1", "label": "Step 1", "type": "AGENT"},
            {"id": "step2", "label": "Step 2", "type": "DATA"},
        ]
        assert diff.added_edges == [{"source": "step1", "target": "step2", "label": None}]
        assert diff.removed_nodes == []
        assert diff.has_changes is True

    def test_detects_added_removed_and_modified_nodes(self):
        current = PlaybookGraph.create(
            nodes=[
                GraphNode(
                    id="step1", kind=NodeKind.API, label="Renamed", config={"agentId": "b"}
                ),
                GraphNode(id="step3", kind=NodeKind.AGENT, label="Step 3"),
            ],
            edges=[GraphEdge(id="e9", source="step1", target="step3")],
        )

        diff = diff_graphs(_base_graph(), current)

        assert diff.added_nodes == [{"id": "step3", "label": "Step 3", "type": "AGENT"}]
        assert diff.removed_nodes == [{"id": "step2", "label": "Step 2", "type": "DATA"}]
        assert diff.modified_nodes == [
            {"id": "step1", "label": "Renamed", "changes": ["label", "type", "config"]}
        ]
        assert diff.added_edges == [{"source": "step1", "target": "step3", "label": None}]
        assert diff.removed_edges == [{"source": "step1", "target": "step2", "label": None}]

    def test_position_and_edge_id_changes_are_ignored(self):
        previous = _base_graph()
        current = PlaybookGraph.create(
            nodes=[
                GraphNode(
                    id="step1",
                    kind=NodeKind.AGENT,
                    label="Step 1",
                    config={"agentId": "a"},
                    position=Position(x=500, y=-20),
                ),
                GraphNode(id="step2", kind=NodeKind.DATA, label="Step 2"),
            ],
            edges=[GraphEdge(id="renamed-edge", source="step1", target="step2")],
        )

        diff = diff_graphs(previous, current)

        assert diff.has_changes is False

    def test_edge_label_change_is_remove_plus_add(self):
        previous = PlaybookGraph.create(
            nodes=[GraphNode(id="b", kind=NodeKind.BRANCH), GraphNode(id="x", kind=NodeKind.AGENT)],
            edges=[GraphEdge(id="e1", source="b", target="x", label="true")],
        )
        current = PlaybookGraph.create(
            nodes=previous.nodes,
            edges=[GraphEdge(id="e1", source="b", target="x", label="false")],
        )

        diff = diff_graphs(previous, current)

        assert diff.added_edges == [{"source": "b", "target": "x", "label": "false"}]
        assert diff.removed_edges == [{"source": "b", "target": "x", "label": "true"}]

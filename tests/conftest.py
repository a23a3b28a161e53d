"""Pytest 配置文件 - 全局 fixtures"""

import os

os.environ.setdefault("ENV", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from playbook_graph.interfaces.api.main import app  # noqa: E402


@pytest.fixture
def client() -> TestClient:
    """FastAPI 测试客户端"""
    return TestClient(app)


@pytest.fixture
def branch_graph_payload() -> dict:
    """示例：带 true/false 两个分支的编辑器图（JSON 形态）"""
    return {
        "nodes": [
            {
                "id": "branch1",
                "type": "BRANCH",
                "position": {"x": 100, "y": 100},
                "data": {"label": "Quality Check", "config": {"condition": "input.score > 75"}},
            },
            {
                "id": "high",
                "type": "AGENT",
                "position": {"x": 400, "y": 50},
                "data": {"label": "High Quality", "config": {"agentId": "premium"}},
            },
            {
                "id": "low",
                "type": "AGENT",
                "position": {"x": 400, "y": 150},
                "data": {"label": "Low Quality", "config": {"agentId": "basic"}},
            },
        ],
        "edges": [
            {"id": "e1", "source": "branch1", "target": "high", "label": "true"},
            {"id": "e2", "source": "branch1", "target": "low", "label": "false"},
        ],
    }

"""PlaybookStep 实体 - playbook 的持久化（列表）形态

业务定义：
- playbook 在存储中是一个按 position 排序的步骤列表
- 普通步骤通过 next_step_key 指向下一步
- BRANCH 步骤通过 config.trueStep / config.falseStep 指向两个分支
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from playbook_graph.domain.exceptions import DomainError
from playbook_graph.domain.value_objects.node_kind import NodeKind

TRUE_STEP_KEY = "trueStep"
FALSE_STEP_KEY = "falseStep"


@dataclass
class PlaybookStep:
    """PlaybookStep 实体

    属性说明：
    - key: 步骤标识（图中即节点 id）
    - name: 步骤名称（图中即节点 label）
    - type: 步骤类型
    - config: 步骤配置
    - position: 在 playbook 中的顺序
    - next_step_key: 下一步的 key（BRANCH 步骤恒为 None）
    """

    key: str
    name: str
    type: NodeKind
    config: dict[str, Any] = field(default_factory=dict)
    position: int = 0
    next_step_key: str | None = None

    @classmethod
    def create(
        cls,
        key: str,
        name: str,
        type: NodeKind,
        config: dict[str, Any] | None = None,
        position: int = 0,
        next_step_key: str | None = None,
    ) -> PlaybookStep:
        """创建 PlaybookStep 的工厂方法

        抛出：
            DomainError: 当 key 或 name 为空时
        """
        if not key or not key.strip():
            raise DomainError("key 不能为空")

        if not name or not name.strip():
            raise DomainError("name 不能为空")

        return cls(
            key=key.strip(),
            name=name.strip(),
            type=NodeKind(type),
            config=dict(config or {}),
            position=position,
            next_step_key=next_step_key.strip() if next_step_key and next_step_key.strip() else None,
        )

    def branch_targets(self) -> dict[str, str]:
        """返回 BRANCH 步骤配置中声明的分支目标（标签 → step key）"""
        if self.type != NodeKind.BRANCH:
            return {}

        targets: dict[str, str] = {}
        for label, config_key in (("true", TRUE_STEP_KEY), ("false", FALSE_STEP_KEY)):
            target = self.config.get(config_key)
            if isinstance(target, str) and target.strip():
                targets[label] = target.strip()
        return targets

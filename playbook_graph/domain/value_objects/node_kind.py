"""NodeKind 枚举 - playbook 图中的节点类型

业务定义：
- 与 playbook step 的类型一一对应（AGENT / DATA / BRANCH / API）
- 校验器只关心 BRANCH（条件分支需要覆盖所有出口），其余类型视为不透明标签
"""

from enum import Enum


class NodeKind(str, Enum):
    """节点类型枚举

    - AGENT: 调用 Agent 的步骤
    - DATA: 数据处理步骤（pluck / merge 等）
    - BRANCH: 条件分支，出边标签代表互斥的分支结果
    - API: 外部 API 调用步骤
    """

    AGENT = "AGENT"
    DATA = "DATA"
    BRANCH = "BRANCH"
    API = "API"

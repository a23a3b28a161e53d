"""Position 值对象 - 节点在编辑器画布上的位置

纯展示信息，校验器不读取它。
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Position 值对象

    属性说明：
    - x: 横坐标（像素，允许负数）
    - y: 纵坐标（像素，允许负数）

    示例：
    >>> Position(x=100, y=200) == Position(x=100, y=200)
    True
    """

    x: float
    y: float

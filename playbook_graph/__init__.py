"""Playbook 图校验服务"""

__version__ = "0.1.0"

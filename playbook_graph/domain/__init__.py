"""Domain 层：实体、值对象、领域服务（纯 Python，不依赖框架）"""

"""Users API - 单表用户 CRUD 服务"""

__version__ = "1.0.0"

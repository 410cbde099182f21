"""核心组件：数据库、异常、校验、日志、中间件"""

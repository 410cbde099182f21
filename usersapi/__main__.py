"""命令行入口：python -m usersapi"""

import uvicorn
from loguru import logger
from pydantic import ValidationError

from usersapi.config import get_settings
from usersapi.core.logging import setup_bootstrap_logging, setup_logging
from usersapi.main import create_app


def main() -> None:
    setup_bootstrap_logging()
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("配置加载失败: {}", exc)
        raise SystemExit(1) from exc

    setup_logging(settings.log_level, json_format=settings.json_logs)

    # 监听地址由 uvicorn 在绑定端口后输出
    # uvicorn 处理 SIGINT/SIGTERM：停止接收新请求，等待进行中的请求，再执行 lifespan 关闭
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_config=None,
    )


if __name__ == "__main__":
    main()

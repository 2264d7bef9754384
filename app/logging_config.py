import logging
import sys


def setup_logging(level: str = "INFO"):
    """
    全局日志配置，进程启动时调用一次。
    """
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )

# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for excmd."""
import logging

logger: logging.Logger = logging.getLogger("excmd")

# Chad CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for chad."""
import logging

logger: logging.Logger = logging.getLogger("chad")

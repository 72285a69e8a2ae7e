# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for OptKit."""
import logging

logger: logging.Logger = logging.getLogger("optkit")

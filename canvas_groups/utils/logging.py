"""Logging setup"""
import logging
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = 'WARNING', log_file: Optional[str] = None) -> logging.Logger:
    """Configure root logging to stderr and, if given, a log file"""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    
    # httpx logs every request at INFO
    logging.getLogger('httpx').setLevel(logging.WARNING)
    
    return logging.getLogger('canvas_groups')

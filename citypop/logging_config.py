import logging

import colorlog

LOG_COLORS = {
    'DEBUG': 'blue',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'bold_red',
}


def setup_logging(level="INFO"):
    """Configure the root logger once, from an entry point."""
    colorlog.basicConfig(
        format='%(log_color)s[%(levelname)s] %(asctime)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        level=getattr(logging, str(level).upper(), logging.INFO),
        log_colors=LOG_COLORS,
    )

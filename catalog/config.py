"""
Configuration and logging setup.
Settings come from environment variables with defaults suited to running from the repo root.
"""

import os
import sys

from loguru import logger


class Config:
	DATA_PATH = os.getenv('MOVIES_DATA_PATH', 'data/movies.json')
	LOG_LEVEL = os.getenv('MOVIES_LOG_LEVEL', 'INFO').upper()
	API_URL = os.getenv('MOVIES_API_URL', 'http://localhost:8000')


# Id of the stderr sink we own; 0 is the sink loguru installs at import
_stderr_sink_id = 0


def configure_logging(level: str = Config.LOG_LEVEL) -> None:
	"""
	Replace our stderr sink (loguru's default on first call) with one at `level`.
	Sinks added by anything else are left alone.
	"""
	global _stderr_sink_id
	try:
		logger.remove(_stderr_sink_id)
	except ValueError:  # already removed elsewhere, e.g. by logger.remove()
		pass
	_stderr_sink_id = logger.add(sys.stderr, level=level)

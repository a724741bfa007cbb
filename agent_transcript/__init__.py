"""
agent_transcript - Render stream-json agent session logs as readable transcripts.
"""
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION

__version__ = APP_VERSION
__all__ = ['APP_NAME', 'APP_VERSION', 'APP_DESCRIPTION']

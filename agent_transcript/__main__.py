"""Allow ``python -m agent_transcript``."""
import sys

from .main import main

sys.exit(main())

"""GitHub issue batch creator.

Reads a TOML file describing issues for a single repository and creates each
one through the GitHub REST API:
- configuration loaded from the environment and `.env`
- structured logging
- per-issue error isolation
"""

__version__ = "0.1.0"

from github_issue_batch.config import Settings

__all__ = ["__version__", "Settings"]

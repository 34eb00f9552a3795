"""stale-branch-cleaner: delete local Git branches whose upstream is gone."""

import os

# GitPython refuses to import when no git is on PATH; the configured
# executable is checked when the first command runs instead.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

__version__ = "0.1.0"

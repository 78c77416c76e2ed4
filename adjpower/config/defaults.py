"""Default configuration: the widget's out-of-the-box graph and exercise."""

from adjpower.config.settings import SessionConfig

# Five vertices, seven edges, unrestricted directed graph; classic powers up
# to 4; seed=42.
DEFAULT_CONFIG = SessionConfig()

"""Version information for seedstats."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to analyzer or storage contracts
# MINOR: New analyzers or commands, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Job files and CLI
#         - YAML stats jobs with generator/graph import paths
#         - `seedstats stats`, `clean` and `analyzers` commands
#         - CSV export of every chain report
# 0.1.0 - Initial release
#         - Seed corpus with persistent storage and failure budget
#         - Analyzer chains with Cartesian aggregation
#         - Naturally sorted CSV reports

# Daytrip: greedy sightseeing route planner
# Package: src.daytrip

__version__ = "1.0.0"
__author__ = "Daytrip Contributors"
__description__ = "Pick which sights fit into a day using greedy heuristics"

# Module structure:
#   - daytrip.catalog  : Place type and the built-in catalog
#   - daytrip.config   : Configuration management
#   - daytrip.plan     : Route aggregate and greedy selectors
#   - daytrip.report   : Runs every selector and renders the report
#   - daytrip.cli      : Command-line interface

"""
Constants and default values for model conversions.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNKNOWN = "Unknown"

#
# Report labels
#
NO_ISSUE_LABEL = "(no issue)"
NO_DESCRIPTION_LABEL = "(no description)"
EMPTY_CELL = "—"

#
# Tempo defaults
#
DEFAULT_SCHEDULE_DAY_TYPE = "WORKING_DAY"
DEFAULT_ASSIGNEE_TYPE = "USER"
PLAN_ITEM_ISSUE = "ISSUE"
PLAN_ITEM_PROJECT = "PROJECT"
DEFAULT_PLAN_ITEM_TYPE = PLAN_ITEM_ISSUE

"""Constants for group assignment."""

# Local search: number of random swap proposals per balanced run
DEFAULT_SWAP_BUDGET = 300

# Random seeding: each student may visit up to ATTEMPT_FACTOR x len(groups)
# groups in round-robin order before being left unassigned.
# Must stay >= 1 so every group is tried at least once per student.
DEFAULT_ATTEMPT_FACTOR = 2

# Default group shells (used when a roster file carries no groups)
DEFAULT_MIN_GROUP_SIZE = 4
DEFAULT_MAX_GROUP_SIZE = 6
IDEAL_GROUP_SIZE = 5

DEFAULT_GROUP_NAME_TEMPLATE = "Group {index}"
DEFAULT_GROUP_ID_TEMPLATE = "group-{index}"

# Config file looked up by ConfigLoader when no path is given
DEFAULT_CONFIG_FILENAME = "groupsort.json"

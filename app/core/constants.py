"""Core constants shared by the service and the request surface."""

# Listing returns at most this many of the most recently created open tasks.
RECENT_TASKS_LIMIT = 5

# Fallback messages when a persistence error carries no message of its own.
CREATE_TASK_FAILED = "Failed to create task"
UPDATE_TASK_FAILED = "Failed to update task"
FETCH_TASKS_FAILED = "Failed to fetch tasks"

# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "DISPATCHER_APP_NAME": "App display name (default: task-dispatcher).",
    "DISPATCHER_LOG_LEVEL": "Console logging level (default: INFO).",
    # HTTP
    "DISPATCHER_HOST": "Bind address (default: 0.0.0.0).",
    "DISPATCHER_PORT": "Listen port (default: 80).",
    # Paths
    "DISPATCHER_DATA_DIR": "Local data directory for logs (default: .local/dispatcher).",
    "DISPATCHER_TASKS_PATH": "Task snapshot JSON path (default: task.json).",
    # Time
    # Stored timestamps carry no offset; they are read back in whatever offset is
    # configured at startup. Changing it between restarts ages every processing task
    # by the difference (claims can be reclaimed early or held too long).
    "DISPATCHER_UTC_OFFSET_HOURS": "Fixed offset for assigned/finished timestamps (default: 8).",
    # Reclaimer
    "DISPATCHER_RECLAIM_ENABLED": "Run the stale-claim reclaimer (true/false, default: true).",
    "DISPATCHER_RECLAIM_INTERVAL_SECONDS": "Seconds between reclaim passes (default: 3600).",
    "DISPATCHER_RECLAIM_TIMEOUT_SECONDS": "Claim age before it is reverted (default: 10800).",
}

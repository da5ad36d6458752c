# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "File log level (default: INFO). The console only shows WARNING+.",
    # Persistence
    "TODO_DATA_DIR": "Local data directory for storage and logs (default: .local/todo).",
    "TODO_STORAGE_BACKEND": "json | sqlite | memory | none (default: json).",
    "TODO_STORAGE_PATH": (
        "Storage file (default: <data_dir>/storage.json, or storage.sqlite3 for sqlite)."
    ),
    "TODO_STORAGE_KEY": "Key the task list is stored under (default: kavia.todo.v1).",
    "TODO_PERSIST_IN_BACKGROUND": "Write snapshots from a worker thread (true/false, default true).",
    # Presentation
    "TODO_ANNOUNCE_SECONDS": "How long status messages stay visible (default: 1.2).",
}

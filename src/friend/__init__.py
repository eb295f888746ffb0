"""Friend App backend: accounts, activity logs, goals and direct messages."""

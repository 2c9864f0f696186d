"""Live support leaderboard: CRUD API, deleted-entry log and WebSocket fan-out."""

"""daygrid - per-day calendar index for posts and calendar events."""

"""Account administration and aggregate statistics."""

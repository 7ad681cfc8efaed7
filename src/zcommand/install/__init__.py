"""Installation engine: place skills and agents into platform directories."""

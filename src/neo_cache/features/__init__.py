"""Feature packages for neo-cache."""

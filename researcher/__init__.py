"""Person researcher API package."""

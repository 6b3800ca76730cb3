"""HTTP routes for the trigger adapter."""

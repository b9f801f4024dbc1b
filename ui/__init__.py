"""UI module for Dynamic Footsteps - keyboard input."""

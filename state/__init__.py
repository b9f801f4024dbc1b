"""State module for Dynamic Footsteps - constants, configuration and game state."""

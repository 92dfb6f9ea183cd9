"""Grid snake: a small fixed-timestep arcade game on an 11x11 board."""

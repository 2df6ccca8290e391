"""Grid snake simulation with poison cells."""

"""Feature packages: the shape wrapper and the sample shapes built on it."""

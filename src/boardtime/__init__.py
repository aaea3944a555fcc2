"""BoardTime - meeting date polls."""

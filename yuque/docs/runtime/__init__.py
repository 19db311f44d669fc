"""Runtime components: document chunking and REST execution."""

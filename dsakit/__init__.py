"""Classic data structures and algorithms: sorting, small exercises, stacks, queues, trees, hash containers and strings."""

__version__ = "0.1.0"
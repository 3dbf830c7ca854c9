"""Interactive teaching programs for stacks, queues, linked lists and graphs."""

__version__ = "0.1.0"
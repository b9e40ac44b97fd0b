"""Operating-system algorithms: scheduling, paging, allocation, data structures and mutual exclusion."""

__version__ = "0.1.0"
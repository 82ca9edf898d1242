"""Graph articulation points, bamboo garden trimming and divide-and-conquer triangulation."""

__version__ = "0.1.0"
"""A linked binary tree with node insertion, traversal generators and shape measurements."""

__version__ = "0.1.0"
__all__ = ["measure", "node", "traversal"]
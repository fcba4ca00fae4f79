"""HTTP service storing examples in MongoDB, organised in hexagonal layers."""

__version__ = "0.1.0"
"""
Lambda handlers package for AWS Lambda functions.
"""
from .telegram import handler

__all__ = ["handler"]

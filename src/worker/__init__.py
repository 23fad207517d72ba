"""Background and startup workers"""
from .bootstrap_admin import bootstrap_admin

__all__ = ["bootstrap_admin"]

# -*- coding: utf-8 -*-
"""
Listing Publisher Application Core Module
"""

from .config import Config

__all__ = ["Config"]

# -*- coding: utf-8 -*-
"""Dialogs of the property submission wizard."""

from .unit_dialog import UnitDialog

__all__ = ['UnitDialog']

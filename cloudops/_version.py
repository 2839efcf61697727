#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Single source of truth for the CloudOps package version.
"""

__version__ = "0.3.0"

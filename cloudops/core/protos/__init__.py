#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Wire messages and client stubs for the cloudlab services.
"""

from . import messages
from .stubs import EC2OpsStub, GenericOpsStub, WordPressOpsStub, method_path

__all__ = [
    "messages",
    "method_path",
    "EC2OpsStub",
    "WordPressOpsStub",
    "GenericOpsStub",
]

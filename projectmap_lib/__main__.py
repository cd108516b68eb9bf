# -*- coding: utf-8 -*-
"""Allows 'python -m projectmap_lib'."""

from .projectmap_cli import main

main()

# -*- coding: utf-8 -*-
"""Workout programs, their days and prescribed exercises, and logged sessions/sets."""

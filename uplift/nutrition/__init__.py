# -*- coding: utf-8 -*-
"""Nutrition domain: goals, daily macro totals and range summaries.

Meals and the food catalogue they draw from live in ``uplift.diet``; this package
only reads them to aggregate consumed calories/protein/carbs/fat.
"""

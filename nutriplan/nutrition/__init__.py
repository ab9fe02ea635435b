# -*- coding: utf-8 -*-
"""Nutrition domain: daily energy and macronutrient targets.

The calculator is pure; `api.py` wires it to the stored profile.
"""

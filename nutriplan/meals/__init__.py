# -*- coding: utf-8 -*-
"""Meals domain: per-user meal slots and the daily energy split across them."""

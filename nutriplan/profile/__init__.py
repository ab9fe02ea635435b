# -*- coding: utf-8 -*-
"""Profile domain: stored biometrics normalized into a typed snapshot."""

# -*- coding: utf-8 -*-
"""Translation dictionaries."""

"""
Formula Catalogue

Importing this package registers every calculator. Import order is the
registration order, which is the order list_all() reports to navigation,
feeds and sitemaps.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from . import tax
from . import investment
from . import savings
from . import business
from . import emergency
from . import debt

__all__ = ['tax', 'investment', 'savings', 'business', 'emergency', 'debt']

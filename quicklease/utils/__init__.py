"""Utility functions for QuickLease.

Import convention: use module-level imports for clarity.

    from quicklease.utils import isodatetime
    date_str = isodatetime.to_datestring(some_date)
"""

from . import isodatetime

__all__ = ["isodatetime"]

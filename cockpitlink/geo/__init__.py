"""
geo - Navigation point values consumed by the cockpit command compilers
"""

from .data_models import GeoPoint, NavPointSpec, DataEntry
from .storage import save_entries, load_entries

__all__ = ['GeoPoint', 'NavPointSpec', 'DataEntry', 'save_entries', 'load_entries']

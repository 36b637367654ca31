"""Single-configuration holders attached to a job or branch."""

from .loader import find_scoped_properties_file, load_scoped_properties, save_scoped_properties
from .models import PropertyScope, ScopedProperties

__all__ = [
    "PropertyScope",
    "ScopedProperties",
    "find_scoped_properties_file",
    "load_scoped_properties",
    "save_scoped_properties",
]

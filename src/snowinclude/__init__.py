"""snowinclude: normalize ServiceNow Script Includes from update-set XML."""

__version__ = "0.1.0"

"""contact-templates — reusable message templates with shared signature values."""

__version__ = '0.1.0'

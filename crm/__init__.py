"""
CRM Desk - customers, inventory and orders
"""
__version__ = "1.0.0"

"""
Utility modules for api gateway: upstream clients, security, dependencies
"""

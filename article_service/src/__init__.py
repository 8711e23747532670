# __init__.py
"""
Article Service - REST API for publishing cybersecurity articles.
"""

__version__ = "1.0.0"
__title__ = "Cybersecurity Article Service"
__description__ = "Article publishing API with MongoDB storage"

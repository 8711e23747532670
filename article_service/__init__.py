"""
Article Service - REST API for publishing cybersecurity articles.
"""
